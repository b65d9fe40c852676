from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def split(s: str, delim: str, skip_empty: bool = False) -> list[str]:
    parts = s.split(delim)
    if skip_empty:
        return [part for part in parts if part]
    return parts


def split_any(s: str, delims: str, skip_empty: bool = False) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    for ch in s:
        if ch in delims:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    if skip_empty:
        return [part for part in parts if part]
    return parts


def split_lines(s: str, skip_empty: bool = False) -> list[str]:
    """Split on ``\\n`` and drop one trailing ``\\r`` from each line."""

    lines = [line[:-1] if line.endswith("\r") else line for line in s.split("\n")]
    if skip_empty:
        return [line for line in lines if line]
    return lines


def to_ints(s: str, delim: str = ",") -> list[int]:
    return [int(part) for part in split(s, delim, skip_empty=True)]


def parse_int(s: str, base: int = 10) -> int | None:
    """Strict integer parse: optional leading ``-`` then digits valid for ``base``.

    Returns ``None`` for anything else, including whitespace, ``+``, radix
    prefixes and underscores that ``int()`` would otherwise accept.
    """

    if not 2 <= base <= 36:
        raise ValueError(f"base must be in [2, 36], got {base}")

    body = s[1:] if s.startswith("-") else s
    if not body:
        return None
    for ch in body:
        digit = _DIGITS.find(ch.lower()) if ch.isascii() else -1
        if not 0 <= digit < base:
            return None
    return int(s, base)
