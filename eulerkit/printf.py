"""A small printf supporting the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, Optional, TextIO

from eulerkit.text import _wrap_int

__all__ = ["to_hex", "format_printf", "printf", "print_error"]

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_TEXT = "(null)"
_ERROR_START = "\033[1;31m"
_ERROR_END = "\033[0m"

# A conversion is a '%' followed by any printable ASCII character.
_DIRECTIVE = re.compile(r"%([ -~])")


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of the non-negative integer ``n``, without a prefix."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return f"{n:X}" if upper else f"{n:x}"


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an integer, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value) & _POINTER_MASK
    if not address:
        return "0x0"
    return "0x" + to_hex(address)


def _render(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return _string(value)
    if conversion in "di":
        return str(_wrap_int(_as_int(value, conversion)))
    if conversion == "u":
        return str(_as_int(value, conversion) & _UINT_MASK)
    if conversion in "xX":
        return to_hex(_as_int(value, conversion) & _UINT_MASK, conversion == "X")
    return _pointer(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Unknown conversions produce nothing; a '%' not followed by a printable
    character is kept as it is. Missing arguments raise TypeError.
    """
    remaining = iter(args)
    return _DIRECTIVE.sub(lambda match: _render(match.group(1), remaining), fmt)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default); return its length."""
    text = format_printf(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)


def print_error(text: Optional[str], file: Optional[TextIO] = None) -> int:
    """Write ``text`` in bold red to ``file`` (standard error by default).

    Returns the number of characters of ``text`` written, colour codes excluded.
    """
    body = _NULL_TEXT if text is None else text
    stream = file if file is not None else sys.stderr
    stream.write(_ERROR_START + body + _ERROR_END)
    return len(body)