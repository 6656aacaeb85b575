from pathlib import Path

import pytest

PUZZLES = Path(__file__).resolve().parent.parent / "puzzles"


@pytest.fixture
def puzzles_dir() -> Path:
    return PUZZLES
