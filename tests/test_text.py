import pytest

from puzzlekit.text import parse_int, split, split_any, split_lines, to_ints


def test_split_keeps_or_skips_empty_fields() -> None:
    assert split("a,,b,", ",") == ["a", "", "b", ""]
    assert split("a,,b,", ",", skip_empty=True) == ["a", "b"]


def test_split_any_breaks_on_each_delimiter() -> None:
    assert split_any("1-2 3", " -") == ["1", "2", "3"]
    assert split_any("a  b", " ") == ["a", "", "b"]
    assert split_any("a  b", " ", skip_empty=True) == ["a", "b"]


def test_split_lines_strips_carriage_returns() -> None:
    assert split_lines("ab\r\ncd\r\n") == ["ab", "cd", ""]
    assert split_lines("ab\r\n\r\ncd", skip_empty=True) == ["ab", "cd"]


def test_to_ints_parses_delimited_integers() -> None:
    assert to_ints("3,-4,,5") == [3, -4, 5]
    assert to_ints("1 2", delim=" ") == [1, 2]
    with pytest.raises(ValueError):
        to_ints("1,x")


def test_parse_int_is_strict() -> None:
    assert parse_int("42") == 42
    assert parse_int("-17") == -17
    assert parse_int("ff", base=16) == 255
    assert parse_int("") is None
    assert parse_int("-") is None
    assert parse_int(" 4") is None
    assert parse_int("+4") is None
    assert parse_int("1_000") is None
    assert parse_int("0x1f", base=16) is None
    assert parse_int("12a") is None
    assert parse_int("٣") is None


def test_parse_int_rejects_unsupported_base() -> None:
    with pytest.raises(ValueError):
        parse_int("1", base=1)
