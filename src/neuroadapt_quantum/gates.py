"""Gate matrix table and circuit description types."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Callable, Literal

import torch

from neuroadapt_quantum.errors import InvalidParameterError, UnsupportedGateError

__all__ = [
    "GateType", "MeasurementBasis", "DTYPE",
    "I", "H", "X", "Y", "Z", "S", "T", "RX", "RY", "RZ",
    "SINGLE_QUBIT_GATES", "TWO_QUBIT_GATES", "ROTATION_GATES", "SUPPORTED_GATES",
    "gate_matrix", "custom_matrix", "QuantumGate", "Measurement", "QuantumCircuit",
]

GateType = Literal["X", "Y", "Z", "H", "S", "T", "RX", "RY", "RZ", "CNOT", "SWAP", "CUSTOM"]
MeasurementBasis = Literal["computational", "x", "y", "z"]

DTYPE = torch.complex128


def _complex_matrix(data: list[list[complex | int | float]]) -> torch.Tensor:
    return torch.tensor(data, dtype=DTYPE)


# identity gate
I = _complex_matrix(
    [[1, 0],
     [0, 1]])

# hadamard gate
_INV_SQRT2 = 1 / math.sqrt(2)
H = _complex_matrix(
    [[_INV_SQRT2, _INV_SQRT2],
     [_INV_SQRT2, -_INV_SQRT2]])

# pauli-x gate
X = _complex_matrix(
    [[0, 1],
     [1, 0]])

# pauli-y gate
Y = _complex_matrix(
    [[0, -1j],
     [1j, 0]])

# pauli-z gate
Z = _complex_matrix(
    [[1, 0],
     [0, -1]])

# phase gate
S = _complex_matrix(
    [[1, 0],
     [0, 1j]])

# pi/8 aka T gate
T = _complex_matrix(
    [[1, 0],
     [0, complex(math.cos(math.pi / 4), math.sin(math.pi / 4))]])

# rotate X gate
RX: Callable[[float], torch.Tensor] = lambda theta: _complex_matrix(
    [[math.cos(theta / 2), complex(0, -math.sin(theta / 2))],
     [complex(0, -math.sin(theta / 2)), math.cos(theta / 2)]])

# rotate Y gate
RY: Callable[[float], torch.Tensor] = lambda theta: _complex_matrix(
    [[math.cos(theta / 2), -math.sin(theta / 2)],
     [math.sin(theta / 2), math.cos(theta / 2)]])

# rotate Z gate
RZ: Callable[[float], torch.Tensor] = lambda theta: _complex_matrix(
    [[complex(math.cos(theta / 2), -math.sin(theta / 2)), 0],
     [0, complex(math.cos(theta / 2), math.sin(theta / 2))]])

SINGLE_QUBIT_GATES: dict[str, torch.Tensor] = {"X": X, "Y": Y, "Z": Z, "H": H, "S": S, "T": T}
ROTATION_GATES: dict[str, Callable[[float], torch.Tensor]] = {"RX": RX, "RY": RY, "RZ": RZ}
TWO_QUBIT_GATES = frozenset({"CNOT", "SWAP"})
SUPPORTED_GATES = frozenset({*SINGLE_QUBIT_GATES, *ROTATION_GATES, *TWO_QUBIT_GATES, "CUSTOM"})

UNITARY_TOLERANCE = 1e-6


def gate_matrix(gate_type: str, angle: float | None = None) -> torch.Tensor:
    """Return the 2x2 unitary for a single-qubit gate.

    Rotation gates need ``angle`` in radians. Two-qubit gates and ``CUSTOM``
    are not in the table; the simulator handles them itself.

    Raises:
        InvalidParameterError: a rotation gate was requested without an angle
        UnsupportedGateError: ``gate_type`` is not a table gate
    """
    if gate_type in SINGLE_QUBIT_GATES:
        # fresh copy so a gate's matrix never aliases the shared constant
        return SINGLE_QUBIT_GATES[gate_type].clone()

    if gate_type in ROTATION_GATES:
        if angle is None:
            raise InvalidParameterError(f"{gate_type} gate requires angle parameter")
        return ROTATION_GATES[gate_type](float(angle))

    raise UnsupportedGateError(f"Unsupported gate type: {gate_type}")


def custom_matrix(data: torch.Tensor | Sequence[Sequence[complex | float | int]]) -> torch.Tensor:
    """Validate a caller-supplied single-qubit unitary."""
    try:
        matrix = data.to(DTYPE, copy=True) if isinstance(data, torch.Tensor) else _complex_matrix([list(row) for row in data])
    except (TypeError, ValueError, RuntimeError) as exc:
        raise InvalidParameterError(f"CUSTOM gate matrix must be 2x2 numeric rows: {exc}") from exc

    if matrix.shape != (2, 2):
        raise InvalidParameterError(f"CUSTOM gate matrix must be 2x2, got shape {tuple(matrix.shape)}")

    product = matrix.conj().T @ matrix
    if not torch.allclose(product, I, atol=UNITARY_TOLERANCE):
        raise InvalidParameterError("CUSTOM gate matrix is not unitary")

    return matrix


@dataclass
class QuantumGate:
    """A gate queued on a circuit.

    ``matrix`` is fixed when the gate is added; editing ``angle`` afterwards
    does not change what gets applied. For CNOT it holds the X matrix applied
    to the target, for SWAP it is ``None``.
    """
    type: str
    target: int
    control: int | None = None
    angle: float | None = None
    matrix: torch.Tensor | None = None

    def copy(self) -> "QuantumGate":
        return replace(self, matrix=self.matrix.clone() if self.matrix is not None else None)


@dataclass
class Measurement:
    qubit: int
    basis: str = "computational"
    result: int | None = None

    def copy(self) -> "Measurement":
        return replace(self)


@dataclass
class QuantumCircuit:
    qubits: int
    gates: list[QuantumGate] = field(default_factory=list)
    measurements: list[Measurement] = field(default_factory=list)

    def copy(self) -> "QuantumCircuit":
        return QuantumCircuit(
            self.qubits, [g.copy() for g in self.gates], [m.copy() for m in self.measurements])
