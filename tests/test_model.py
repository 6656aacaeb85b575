from somacube.core.model import Block, Color, PuzzleError


def test_block_hash_and_eq():
    b1 = Block(1, 2, 3)
    b2 = Block(1, 2, 3)
    assert b1 == b2
    assert hash(b1) == hash(b2)
    assert len({b1, b2}) == 1


def test_block_arithmetic_returns_new_values():
    b = Block(1, 2, 3)
    assert b + Block(1, 1, 1) == Block(2, 3, 4)
    assert b - Block(1, 2, 3) == Block(0, 0, 0)
    assert b.translate(-1, 0, 2) == Block(0, 2, 5)
    assert b == Block(1, 2, 3)


def test_color_is_a_closed_string_enum():
    assert Color("red") is Color.RED
    assert Color.BLUE == "blue"
    assert {c.value for c in Color} >= {"red", "yellow", "blue", "white"}


def test_puzzle_error_is_a_value_error():
    assert issubclass(PuzzleError, ValueError)
