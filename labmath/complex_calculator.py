"""Command-line calculator for complex-number arithmetic."""

from __future__ import annotations

import math
import operator
import os
import re
import sys
from collections.abc import Callable, Sequence

from labmath.complex_number import ComplexNumber

_NUMBER_ERROR = "Wrong number format!"
_OPERATION_ERROR = "Wrong operation format!"

_C_WHITESPACE = " \t\n\v\f\r"

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_HEX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
)
_INFINITY = re.compile(r"([+-]?)inf(?:inity)?", re.IGNORECASE)
_NAN = re.compile(r"([+-]?)nan(?:\([0-9A-Za-z_]*\))?", re.IGNORECASE)

_OPERATIONS: dict[str, Callable[[ComplexNumber, ComplexNumber], ComplexNumber]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def parse_double(arg: str) -> float:
    """Parse a whole argument as a floating-point number.

    Leading whitespace is allowed; anything left over after the number is
    an error. An empty argument reads as zero.
    """
    if arg == "":
        return 0.0
    text = arg.lstrip(_C_WHITESPACE)
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _HEX.fullmatch(text):
        return float.fromhex(text)
    match = _INFINITY.fullmatch(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    match = _NAN.fullmatch(text)
    if match:
        return math.copysign(math.nan, -1.0 if match.group(1) == "-" else 1.0)
    raise ValueError(_NUMBER_ERROR)


def parse_operation(arg: str) -> str:
    """Return the operation symbol if it is one of '+', '-', '*', '/'."""
    if arg not in _OPERATIONS:
        raise ValueError(_OPERATION_ERROR)
    return arg


def _format_double(value: float) -> str:
    return format(value, "g")


class ComplexCalculator:
    """Evaluates one complex operation given as command-line arguments."""

    def _help(self, appname: str, message: str = "") -> str:
        return (
            message
            + "This is a complex number calculator application.\n\n"
            + "Please provide arguments in the following format:\n\n"
            + "  $ " + appname + " <z1_real> <z1_imaginary> "
            + "<z2_real> <z2_imaginary> <operation>\n\n"
            + "Where all arguments are double-precision numbers, "
            + "and <operation> is one of '+', '-', '*', '/'.\n"
        )

    def __call__(self, argv: Sequence[str]) -> str:
        """Compute the result for ``argv`` (program name first) as text."""
        appname = argv[0] if argv else ""
        if len(argv) == 1:
            return self._help(appname)
        if len(argv) != 6:
            return self._help(appname, "ERROR: Should be 5 arguments.\n\n")

        try:
            z1_real, z1_imag, z2_real, z2_imag = (
                parse_double(arg) for arg in argv[1:5]
            )
            symbol = parse_operation(argv[5])
        except ValueError as error:
            return str(error)

        z1 = ComplexNumber(z1_real, z1_imag)
        z2 = ComplexNumber(z2_real, z2_imag)
        try:
            result = _OPERATIONS[symbol](z1, z2)
        except ZeroDivisionError as error:
            return str(error)

        return (
            f"Real = {_format_double(result.real)} "
            f"Imaginary = {_format_double(result.imag)}"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on the given arguments and print its output."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "complex-number"
    print(ComplexCalculator()([prog, *args]))
    return 0