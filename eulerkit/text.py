"""String and number helpers with C-string semantics."""

from __future__ import annotations

from typing import Optional, Union

from eulerkit.chars import is_digit, is_space

__all__ = [
    "atoi",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "itoa",
    "pow10",
]

_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading control whitespace (tab to carriage return, not the blank) is
    skipped, one optional sign is honoured and digits are read until the first
    non-digit. No digits gives 0. The result wraps like a 32-bit ``int``.
    """
    rest = text.lstrip("\t\n\v\f\r")
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(sign * value)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {sep!r}")
    return [field for field in text.split(sep) if field]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    _require_int(start, "start")
    _require_int(length, "length")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at index 0; no match gives None.
    """
    _require_int(length, "length")
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def _code_at(s: Union[str, bytes], i: int) -> int:
    if i >= len(s):
        return 0
    item = s[i]
    return item if isinstance(item, int) else ord(item)


def strncmp(a: Union[str, bytes], b: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0; 0 when the compared parts are equal.
    """
    _require_int(n, "n")
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        ca, cb = _code_at(a, i), _code_at(b, i)
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def itoa(n: int) -> str:
    """Decimal text of the integer ``n``."""
    return str(_require_int(n, "n"))


def pow10(exponent: int) -> int:
    """Ten to the power ``exponent``, wrapping like a 32-bit ``int``."""
    _require_int(exponent, "exponent")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return _wrap_int(10**exponent)