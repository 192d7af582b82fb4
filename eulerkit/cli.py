"""Interactive menu for choosing and solving a problem."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

from eulerkit.chars import is_digit
from eulerkit.multiples import report, sum_multiples_of_3_and_5
from eulerkit.text import atoi

__all__ = ["run_problem", "main", "MENU_PROMPT", "NUMBER_PROMPT", "INVALID_INPUT"]

MENU_PROMPT = "1. Multiples of 3 and 5\n Select the problem you wish to solve > "
NUMBER_PROMPT = "Enter the maximum number > "
INVALID_INPUT = "Invalid input\n"

Reader = Callable[[str], str]
Writer = Callable[[str], object]


def _ask_number(read: Reader, write: Writer) -> int:
    while True:
        answer = read(NUMBER_PROMPT)
        if all(is_digit(ch) for ch in answer):
            return atoi(answer)
        write(INVALID_INPUT)


def _multiples(read: Reader, write: Writer) -> int:
    limit = _ask_number(read, write)
    write(report(limit) + "\n")
    return sum_multiples_of_3_and_5(limit)


_PROBLEMS = {"1": _multiples}


def run_problem(
    choice: str,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
) -> Optional[int]:
    """Run the problem selected by ``choice`` and return its answer.

    ``read`` is called with a prompt and returns a line of input; ``write``
    receives output text. An unknown choice does nothing and returns None.
    """
    problem = _PROBLEMS.get(choice)
    if problem is None:
        return None
    return problem(read if read is not None else input, write if write is not None else sys.stdout.write)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a problem until a valid one is chosen, then solve it."""
    write = sys.stdout.write
    try:
        while True:
            choice = input(MENU_PROMPT)
            if choice in _PROBLEMS:
                break
            write(INVALID_INPUT)
        run_problem(choice, input, write)
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())