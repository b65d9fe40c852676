from puzzlekit.parsing import parse_char_grid, parse_int_grid


def test_parse_char_grid_keeps_every_character_and_row_order() -> None:
    grid = parse_char_grid(["ab", "", "c d"])

    assert grid == [["a", "b"], [], ["c", " ", "d"]]


def test_parse_int_grid_drops_non_digits_instead_of_zero_filling() -> None:
    assert parse_int_grid(["a1b2", "34"]) == [[1, 2], [3, 4]]


def test_parse_int_grid_ignores_non_ascii_digits() -> None:
    # Arabic-Indic and fullwidth digits pass str.isdigit() but are not ASCII.
    assert parse_int_grid(["1٣２5", "x"]) == [[1, 5], []]
