# labmath

Small mathematical building blocks:

- `labmath.complex_number.ComplexNumber` is a complex number with `+`, `-`, `*` and `/`.
  Two numbers compare equal when their difference is within machine epsilon in both
  parts. Dividing by a number within machine epsilon of zero raises `ZeroDivisionError`.
- `labmath.complex_calculator.ComplexCalculator` is a command-line style calculator
  for two complex numbers. The `complex-number` command runs it.
- `labmath.conways_life.ConwaysLife` is Conway's Game of Life on a grid whose edges
  wrap around like a torus. It can check for still lifes and oscillators.

## Installation

```
pip install .
```

## Complex numbers

```python
from labmath.complex_number import ComplexNumber

a = ComplexNumber(1.0, 2.0)
b = ComplexNumber(3.0, 4.0)

print((a * b).real, (a * b).imag)          # -5.0 10.0
print(a / b == ComplexNumber(0.44, 0.08))  # True
print(ComplexNumber().is_zero())           # True
```

`real` and `imag` are plain attributes and both default to `0.0`. The numbers can
be changed after they are created, so they are not hashable.

## Calculator

The `complex-number` command takes the real and imaginary parts of two numbers,
followed by an operation. The operation is one of `+`, `-`, `*` or `/`:

```
$ complex-number 1 2 3 4 "*"
Real = -5 Imaginary = 10
```

With no arguments the command prints the usage text. With the wrong number of
arguments it prints the usage text after an error line. It prints one of these
messages in place of a result:

- `Wrong number format!`
- `Wrong operation format!`
- `Can't divide by zero`

The command always exits with status 0.

From Python, pass the argument list with the program name first:

```python
from labmath.complex_calculator import ComplexCalculator, parse_double, parse_operation

calc = ComplexCalculator()
print(calc(["complex-number", "1", "1", "1", "1", "/"]))  # Real = 1 Imaginary = 0

parse_double("2.5")     # 2.5
parse_operation("*")    # '*'
```

`parse_double` accepts:

- decimal and hexadecimal floating-point notation,
- `inf`, `infinity` and `nan`,
- whitespace before the number.

Anything left over after the number raises `ValueError`. An empty string reads as
`0.0`. `parse_operation` raises `ValueError` for anything but the four operation
symbols.

## Game of Life

```python
from labmath.conways_life import ConwaysLife

life = ConwaysLife([
    [0, 0, 0, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0],
])

print(life.is_stable())        # False
print(life.is_periodic(5))     # 2  (a blinker)
life.next_gen(1)
print(life.grid[2])            # [False, True, True, True, False]
```

- `ConwaysLife()` with no grid starts from an empty 5×5 board.
- `set_grid(grid)` replaces the cells. The grid must be rectangular and at least 3×3;
  otherwise `ValueError` is raised.
- `grid` returns a copy of the cells as lists of booleans.
- `next_gen(n)` advances the board by `n` generations.
- `is_stable()` tells whether the next generation is the same as the current one.
- `is_periodic(max_period)` returns the smallest period up to `max_period`, or -1 if
  the pattern does not come back within that many generations.
- `copy()` returns an independent board with the same cells.

`next_gen` and `is_periodic` raise `ValueError` for a count below 1.

## Tests

```
pip install ".[test]"
pytest
```