"""Single-qubit state values and their Bloch sphere projection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from typing_extensions import override

from neuroadapt_quantum.complex_math import (
    ONE, ZERO, Complex, add, conjugate, magnitude_squared, multiply,
)
from neuroadapt_quantum.errors import InvalidParameterError

__all__ = [
    "QubitState", "BlochVector",
    "create_qubit_state", "ground_state", "excited_state", "superposition_state",
    "probability", "bloch_vector", "overlap", "describe_bloch_vector",
]


@dataclass(frozen=True)
class QubitState:
    """alpha|0⟩ + beta|1⟩.

    Normalization is assumed by every consumer but never enforced here.
    """
    alpha: Complex
    beta: Complex

    @override
    def __str__(self) -> str:
        """Pretty print the state in basis notation."""
        number_of_decimals = 4
        terms: list[str] = []

        for basis, amplitude in (("0", self.alpha), ("1", self.beta)):
            real, imag = amplitude.real, amplitude.imaginary

            # Skip negligible amplitudes for display purposes
            if math.hypot(real, imag) < 1e-10:
                continue

            if abs(imag) < 1e-10:
                coef = f"{real:.{number_of_decimals}f}"
            elif abs(real) < 1e-10:
                coef = f"{imag:.{number_of_decimals}f}i"
            else:
                sign = "+" if imag >= 0 else "-"
                coef = f"({real:.{number_of_decimals}f} {sign} {abs(imag):.{number_of_decimals}f}i)"

            terms.append(f"{coef}|{basis}⟩")

        if not terms:
            return "|ψ⟩ = 0"

        result = "|ψ⟩ = " + terms[0]
        for term in terms[1:]:
            if term.startswith("-"):
                result += f" - {term[1:]}"
            else:
                result += f" + {term}"
        return result


class BlochVector(NamedTuple):
    x: float
    y: float
    z: float

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)


def create_qubit_state(alpha: Complex | complex | float, beta: Complex | complex | float) -> QubitState:
    if not isinstance(alpha, Complex):
        alpha = Complex.from_builtin(alpha)
    if not isinstance(beta, Complex):
        beta = Complex.from_builtin(beta)
    return QubitState(alpha, beta)


def ground_state() -> QubitState:
    return QubitState(ONE, ZERO)


def excited_state() -> QubitState:
    return QubitState(ZERO, ONE)


def superposition_state() -> QubitState:
    norm = 1 / math.sqrt(2)
    return QubitState(Complex(norm, 0.0), Complex(norm, 0.0))


def probability(state: QubitState, outcome: int) -> float:
    """Probability of reading ``outcome`` (0 or 1) in the computational basis."""
    if outcome == 0:
        return magnitude_squared(state.alpha)
    if outcome == 1:
        return magnitude_squared(state.beta)
    raise InvalidParameterError(f"Measurement outcome must be 0 or 1, got {outcome}")


def bloch_vector(state: QubitState) -> BlochVector:
    """Project a qubit state onto the Bloch sphere.

    x and y are twice the real and imaginary parts of alpha·conj(beta),
    z is |alpha|² - |beta|². For a normalized state the result is a unit
    vector: |0⟩ maps to (0, 0, 1) and |1⟩ to (0, 0, -1).
    """
    coherence = multiply(state.alpha, conjugate(state.beta))
    x = 2 * coherence.real
    y = 2 * coherence.imaginary
    z = state.alpha.real ** 2 + state.alpha.imaginary ** 2 - state.beta.real ** 2 - state.beta.imaginary ** 2
    return BlochVector(x, y, z)


def overlap(a: QubitState, b: QubitState) -> Complex:
    """Inner product ⟨a|b⟩."""
    return add(
        multiply(conjugate(a.alpha), b.alpha),
        multiply(conjugate(a.beta), b.beta),
    )


def describe_bloch_vector(vector: BlochVector) -> str:
    """Screen reader announcement for a state change."""
    return (
        f"Quantum state updated. Bloch vector at coordinates: "
        f"X {vector.x:.2f}, Y {vector.y:.2f}, Z {vector.z:.2f}. "
        f"Magnitude: {vector.magnitude:.2f}"
    )
