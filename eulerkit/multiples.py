"""Sum of the multiples of 3 and 5 below a limit."""

from __future__ import annotations

__all__ = ["sum_multiples_of_3_and_5", "report"]

_UINT_MASK = 0xFFFFFFFF


def _sum_of_multiples_below(step: int, limit: int) -> int:
    count = (limit - 1) // step
    return step * count * (count + 1) // 2


def sum_multiples_of_3_and_5(limit: int) -> int:
    """Sum of every natural number below ``limit`` divisible by 3 or 5.

    The result wraps to an unsigned 32-bit value; limits of 3 or less give 0.
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TypeError(f"limit must be an integer, got {type(limit).__name__}")
    if limit <= 3:
        return 0
    total = (
        _sum_of_multiples_below(3, limit)
        + _sum_of_multiples_below(5, limit)
        - _sum_of_multiples_below(15, limit)
    )
    return total & _UINT_MASK


def _as_signed(value: int) -> int:
    return value - (1 << 32) if value & 0x80000000 else value


def report(limit: int) -> str:
    """Return the sentence announcing the sum for ``limit`` (without a trailing newline)."""
    result = _as_signed(sum_multiples_of_3_and_5(limit))
    return f"The sum of all the multiples of 3 and 5 below {limit} is {result}"