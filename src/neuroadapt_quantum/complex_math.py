"""Complex arithmetic on (real, imaginary) pairs."""

from __future__ import annotations

from typing import NamedTuple

__all__ = ["Complex", "ZERO", "ONE", "add", "multiply", "conjugate", "magnitude_squared"]


class Complex(NamedTuple):
    real: float
    imaginary: float

    @classmethod
    def from_builtin(cls, value: complex | float | int) -> "Complex":
        value = complex(value)
        return cls(value.real, value.imag)

    def to_builtin(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        sign = "+" if self.imaginary >= 0 else "-"
        return f"({self.real:.4f} {sign} {abs(self.imaginary):.4f}i)"


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.real + b.real, a.imaginary + b.imaginary)


def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(
        a.real * b.real - a.imaginary * b.imaginary,
        a.real * b.imaginary + a.imaginary * b.real,
    )


def conjugate(a: Complex) -> Complex:
    return Complex(a.real, -a.imaginary)


def magnitude_squared(a: Complex) -> float:
    """|a|², the probability weight of an amplitude."""
    return a.real ** 2 + a.imaginary ** 2
