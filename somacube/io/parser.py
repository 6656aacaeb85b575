from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from somacube.core.board import Board
from somacube.core.grid import Grid
from somacube.core.model import Color, PuzzleError
from somacube.core.orientation import Orientation
from somacube.core.piece import Piece

logger = logging.getLogger(__name__)

Coord = Tuple[int, int, int]


class PuzzleFormatError(PuzzleError):
    """A puzzle file that cannot be read as a puzzle."""


@dataclass
class PieceSpec:
    name: str
    color: Color
    blocks: List[Coord]

    def __post_init__(self) -> None:
        if len(set(self.blocks)) != len(self.blocks):
            raise PuzzleFormatError(f"piece {self.name!r} lists the same block twice")


@dataclass
class PuzzleSpec:
    name: str
    size: int
    pieces: List[PieceSpec] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)


def parse_color(value: Any) -> Color:
    try:
        return Color(str(value).strip().lower())
    except ValueError:
        raise PuzzleFormatError(f"Invalid color {value!r}") from None


def parse_blocks(text: str) -> List[Coord]:
    """Parse ``"000-100-010"``: one digit per axis, blocks joined by '-'."""
    blocks: List[Coord] = []
    for chunk in text.strip().split("-"):
        digits = [int(c) for c in chunk if c.isdigit()]
        if len(digits) < 3:
            raise PuzzleFormatError(f"block {chunk!r} needs three digits")
        blocks.append((digits[0], digits[1], digits[2]))
    return blocks


def parse_text(text: str) -> PuzzleSpec:
    """Read the line format: ``name,size`` then ``name,color,blocks`` per piece."""
    lines = [ln.strip() for ln in text.splitlines()]
    lines = [ln for ln in lines if ln and not ln.startswith("#")]
    if not lines:
        raise PuzzleFormatError("empty puzzle file")

    top = lines[0].split(",")
    if len(top) < 2:
        raise PuzzleFormatError(f"header {lines[0]!r} should be 'name,size'")
    try:
        size = int(top[1])
    except ValueError:
        raise PuzzleFormatError(f"grid size {top[1]!r} is not an integer") from None

    puzzle = PuzzleSpec(name=top[0].strip(), size=size)
    for lineno, line in enumerate(lines[1:], start=2):
        parts = line.split(",")
        if len(parts) != 3:
            raise PuzzleFormatError(f"line {lineno}: expected 'name,color,blocks', got {line!r}")
        name, color, blocks = parts
        puzzle.pieces.append(PieceSpec(name.strip(), parse_color(color), parse_blocks(blocks)))
    return puzzle


def parse_mapping(data: Any) -> PuzzleSpec:
    """Read the YAML layout (already loaded into Python objects)."""
    if not isinstance(data, dict):
        raise PuzzleFormatError("puzzle must be a mapping")
    try:
        size = int(data["size"])
    except KeyError:
        raise PuzzleFormatError("puzzle is missing 'size'") from None
    except (TypeError, ValueError):
        raise PuzzleFormatError(f"grid size {data['size']!r} is not an integer") from None

    pieces_raw = data.get("pieces") or []
    if not isinstance(pieces_raw, list):
        raise PuzzleFormatError("'pieces' must be a list of piece mappings")
    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise PuzzleFormatError("'options' must be a mapping")

    pieces: List[PieceSpec] = []
    for i, raw in enumerate(pieces_raw):
        if not isinstance(raw, dict):
            raise PuzzleFormatError(f"piece {i} must be a mapping")
        blocks_raw = raw.get("blocks", [])
        if isinstance(blocks_raw, str):
            blocks = parse_blocks(blocks_raw)
        else:
            try:
                blocks = [(int(b[0]), int(b[1]), int(b[2])) for b in blocks_raw]
            except (TypeError, ValueError, IndexError):
                raise PuzzleFormatError(f"piece {i}: blocks must be [x, y, z] triples") from None
        pieces.append(PieceSpec(
            name=str(raw.get("name", i)),
            color=parse_color(raw.get("color", "white")),
            blocks=blocks,
        ))

    return PuzzleSpec(
        name=str(data.get("name", "puzzle")),
        size=size,
        pieces=pieces,
        options=dict(options),
    )


def load_puzzle(path: str | Path) -> PuzzleSpec:
    """Load a puzzle file; ``.yaml``/``.yml`` is YAML, anything else the line format."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise PuzzleFormatError(f"{path}: not a UTF-8 text file ({exc.reason})") from exc

    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise PuzzleFormatError(f"{path}: {exc}") from exc
        puzzle = parse_mapping(data)
    else:
        puzzle = parse_text(text)

    logger.debug("loaded %s: %r, edge %d, %d pieces", path, puzzle.name, puzzle.size, len(puzzle.pieces))
    return puzzle


def build_board(puzzle: PuzzleSpec, dedup: Optional[bool] = None) -> Board:
    """Validate the grid, then build every piece (ids in file order)."""
    grid = Grid(puzzle.size)
    pieces = tuple(
        Piece.build(pid, spec.name, spec.color, Orientation.of(spec.blocks), grid, dedup=dedup)
        for pid, spec in enumerate(puzzle.pieces)
    )
    return Board(name=puzzle.name, grid=grid, pieces=pieces)
