"""Complex numbers with explicit real and imaginary parts."""

from __future__ import annotations

import sys
from dataclasses import dataclass

EPSILON = sys.float_info.epsilon


@dataclass(eq=False)
class ComplexNumber:
    """A complex number ``real + imag*i``.

    Two numbers compare equal when their difference is zero to within
    machine epsilon in both parts.
    """

    real: float = 0.0
    imag: float = 0.0

    __hash__ = None  # mutable and compared with a tolerance

    def is_zero(self) -> bool:
        """Return True if both parts lie strictly within machine epsilon of zero."""
        return -EPSILON < self.real < EPSILON and -EPSILON < self.imag < EPSILON

    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def __truediv__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        if other.is_zero():
            raise ZeroDivisionError("Can't divide by zero")
        scale = 1.0 / (other.real * other.real + other.imag * other.imag)
        return ComplexNumber(
            scale * self.real * other.real + scale * self.imag * other.imag,
            scale * self.imag * other.real - scale * self.real * other.imag,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return (self - other).is_zero()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result