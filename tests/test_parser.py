import pytest

from somacube.core.model import Color, PuzzleError
from somacube.io.parser import (
    PuzzleFormatError,
    build_board,
    load_puzzle,
    parse_blocks,
    parse_text,
)


def test_load_soma_yaml(puzzles_dir):
    puzzle = load_puzzle(puzzles_dir / "soma.yaml")
    assert puzzle.name == "soma"
    assert puzzle.size == 3
    assert [p.name for p in puzzle.pieces] == ["V", "L", "T", "Z", "A", "B", "P"]
    assert puzzle.pieces[0].color is Color.RED
    assert puzzle.options["corners"] is True


def test_soma_pieces_fill_the_cube(puzzles_dir):
    board = build_board(load_puzzle(puzzles_dir / "soma.yaml"))
    assert board.volume() == board.grid.cells == 27
    assert [len(p.orientations) for p in board.pieces] == [12, 24, 12, 12, 12, 12, 8]
    assert [p.piece_id for p in board.pieces] == list(range(7))


def test_load_line_format(puzzles_dir):
    puzzle = load_puzzle(puzzles_dir / "slabs.txt")
    assert puzzle.name == "slabs"
    assert puzzle.size == 2
    assert puzzle.pieces[1].name == "bottom"
    assert puzzle.pieces[1].color is Color.BLUE
    assert puzzle.pieces[1].blocks == [(0, 0, 1), (1, 0, 1), (0, 1, 1), (1, 1, 1)]


def test_parse_blocks_ignores_non_digits():
    assert parse_blocks("(0,1,2)-3 4 5") == [(0, 1, 2), (3, 4, 5)]


def test_parse_blocks_needs_three_digits():
    with pytest.raises(PuzzleFormatError):
        parse_blocks("00-100")


def test_invalid_color():
    with pytest.raises(PuzzleFormatError, match="Invalid color"):
        parse_text("x,2\na,purple,000\n")


def test_bad_header():
    with pytest.raises(PuzzleFormatError):
        parse_text("just-a-name\n")
    with pytest.raises(PuzzleFormatError):
        parse_text("x,two\n")


def test_bad_piece_line_reports_line_number():
    with pytest.raises(PuzzleFormatError, match="line 3"):
        parse_text("x,2\na,red,000\nb,red\n")


def test_duplicate_blocks_rejected():
    with pytest.raises(PuzzleFormatError):
        parse_text("x,2\na,red,000-000\n")


def test_yaml_blocks_as_string(tmp_path):
    path = tmp_path / "p.yml"
    path.write_text("name: s\nsize: 1\npieces:\n  - name: u\n    color: White\n    blocks: '000'\n")
    puzzle = load_puzzle(path)
    assert puzzle.pieces[0].blocks == [(0, 0, 0)]
    assert puzzle.pieces[0].color is Color.WHITE


def test_yaml_missing_size(tmp_path):
    path = tmp_path / "p.yaml"
    path.write_text("name: s\npieces: []\n")
    with pytest.raises(PuzzleFormatError, match="size"):
        load_puzzle(path)


def test_yaml_syntax_error(tmp_path):
    path = tmp_path / "p.yaml"
    path.write_text("name: [unclosed\n")
    with pytest.raises(PuzzleFormatError):
        load_puzzle(path)


def test_oversized_grid_rejected_before_pieces_are_built():
    with pytest.raises(PuzzleError):
        build_board(parse_text("big,5\na,red,000\n"))


def test_dedup_flag_reaches_pieces(puzzles_dir):
    board = build_board(load_puzzle(puzzles_dir / "bars.txt"), dedup=True)
    assert [len(p.placements) for p in board.pieces] == [12, 12, 12, 12]


@pytest.mark.parametrize(
    "body, field",
    [
        ("size: 1\noptions: [corners]\n", "options"),
        ("size: 1\npieces: 5\n", "pieces"),
    ],
)
def test_yaml_fields_of_wrong_type(tmp_path, body, field):
    path = tmp_path / "p.yaml"
    path.write_text(body)
    with pytest.raises(PuzzleFormatError, match=field):
        load_puzzle(path)


def test_non_utf8_file_is_a_format_error(tmp_path):
    path = tmp_path / "p.txt"
    path.write_bytes(b"x,1\n\xff,red,000\n")
    with pytest.raises(PuzzleFormatError, match="UTF-8"):
        load_puzzle(path)
