# eulerkit

An interactive solver for a Project Euler problem, together with the small
helpers it is built on.

## Running the solver

After installing the package, run:

    eulerkit

The solver shows a menu of problems. The menu has one entry:

    1. Multiples of 3 and 5
     Select the problem you wish to solve >

Enter `1`. Any other answer prints `Invalid input` and shows the menu again.
The solver then asks:

    Enter the maximum number >

Answer with a number written only in digits. If the answer holds any other
character, the solver prints `Invalid input` and asks again. An empty answer
counts as 0. The solver then prints the sum of all multiples of 3 or 5 below
that number:

    The sum of all the multiples of 3 and 5 below 1000 is 233168

If input ends (end of file) or is interrupted, the command exits with status 1.
Otherwise it exits with status 0.

## Using the library

```python
from eulerkit.multiples import sum_multiples_of_3_and_5, report

sum_multiples_of_3_and_5(10)   # 23
report(10)                     # "The sum of all the multiples of 3 and 5 below 10 is 23"
```

`sum_multiples_of_3_and_5` returns 0 for limits of 3 or less. Its result wraps
to an unsigned 32-bit value. `report` shows that value as a signed 32-bit
number.

The solver can also be run from code. `eulerkit.cli.run_problem(choice, read,
write)` takes the menu choice, a function that is given a prompt and returns a
line of input, and a function that receives output text. It returns the answer,
or None if the choice is unknown:

```python
from eulerkit.cli import run_problem

out = []
run_problem("1", lambda prompt: "10", out.append)   # 23
```

### Helper modules

- `eulerkit.chars`: ASCII character tests and case conversion: `is_digit`,
  `is_alpha`, `is_alnum`, `is_ascii`, `is_print`, `is_space` and `to_lower`,
  `to_upper`. Each one accepts a one-character string or an integer code.
  `is_space` is true only for codes 9 to 13, so a blank does not count.
- `eulerkit.text`: string and number helpers that follow C string rules:
  - `atoi` parses a leading decimal integer and wraps it to 32 bits.
  - `itoa` gives the decimal text of an integer.
  - `split` splits on one character and drops empty fields.
  - `strtrim` strips a set of characters from both ends.
  - `substr` takes a slice from a start index for a given length.
  - `strnstr` finds a needle within the first `length` characters and returns
    its index or None.
  - `strncmp` compares at most `n` characters and returns the difference of
    the first codes that differ.
  - `pow10` gives ten to a power, wrapped to 32 bits.
- `eulerkit.printf`: a small printf that supports `%c %s %d %i %u %x %X %p %%`.
  - `format_printf` returns the formatted string.
  - `printf` writes it to a file, standard output by default, and returns its
    length.
  - `to_hex` gives the hexadecimal digits of a non-negative integer.
  - `print_error` writes text in bold red, to standard error by default.
- `eulerkit.lines`: `LineReader` and `read_lines` read a text or binary stream
  one line at a time through a buffer of a fixed size. The default size is 8.
  Each line keeps its newline.

```python
import io
from eulerkit.lines import read_lines
from eulerkit.printf import format_printf

list(read_lines(io.StringIO("a\nb"), 8))    # ["a\n", "b"]
format_printf("%d is %x in hex", 255, 255)  # "255 is ff in hex"
```

## What the package does not do

The solver offers only the one problem above. There are no other problems to
choose, and nothing is stored between runs.

## Running the tests

Install the package with its `test` extra, then run `pytest`.