"""Qubit register: one independent amplitude pair per qubit."""

from __future__ import annotations

import operator
from typing import Annotated

from typing_extensions import override

import torch

from neuroadapt_quantum.complex_math import Complex
from neuroadapt_quantum.errors import InvalidParameterError, QubitIndexError
from neuroadapt_quantum.gates import DTYPE
from neuroadapt_quantum.state import QubitState

__all__ = ["QubitRegister"]


class QubitRegister:
    """Owned, mutable store of qubit amplitudes.

    Row ``i`` of ``amplitudes`` is ``[alpha_i, beta_i]``. Nothing outside the
    simulator should hold a reference to the tensor; reads go through
    ``state()`` which returns immutable snapshots.
    """
    amplitudes: Annotated[torch.Tensor, "(n_qubits, 2) complex128"]
    n_qubits: int
    device: torch.device

    def __init__(self, n_qubits: int, device: torch.device | None = None):
        if isinstance(n_qubits, bool) or not isinstance(n_qubits, int) or n_qubits < 1:
            raise InvalidParameterError(f"Qubit count must be a positive integer, got {n_qubits!r}")

        self.n_qubits = n_qubits
        self.device = device if device is not None else torch.device("cpu")
        self.amplitudes = torch.zeros((n_qubits, 2), dtype=DTYPE, device=self.device)
        self.reset()

    def reset(self) -> None:
        """Put every qubit back in |0⟩."""
        _ = self.amplitudes.zero_()
        self.amplitudes[:, 0] = 1.0

    def __len__(self) -> int:
        return self.n_qubits

    def check_index(self, index: int) -> int:
        if isinstance(index, bool):
            raise QubitIndexError(index)
        try:
            position = operator.index(index)
        except TypeError:
            raise QubitIndexError(index) from None
        if not 0 <= position < self.n_qubits:
            raise QubitIndexError(index)
        return position

    def state(self, index: int) -> QubitState:
        alpha, beta = self.amplitudes[self.check_index(index)].tolist()
        return QubitState(Complex(alpha.real, alpha.imag), Complex(beta.real, beta.imag))

    def states(self) -> list[QubitState]:
        return [self.state(i) for i in range(self.n_qubits)]

    def set_state(self, index: int, state: QubitState) -> None:
        self.amplitudes[self.check_index(index)] = torch.tensor(
            [state.alpha.to_builtin(), state.beta.to_builtin()], dtype=DTYPE, device=self.device)

    def apply(self, index: int, matrix: torch.Tensor) -> None:
        """|ψ⟩ → M |ψ⟩ on one qubit.

        newAlpha = M00·alpha + M01·beta, newBeta = M10·alpha + M11·beta.
        No renormalization afterwards.
        """
        row = self.check_index(index)
        self.amplitudes[row] = torch.mv(matrix.to(self.device), self.amplitudes[row])

    def swap(self, first: int, second: int) -> None:
        a, b = self.check_index(first), self.check_index(second)
        self.amplitudes[[a, b]] = self.amplitudes[[b, a]]

    @override
    def __repr__(self) -> str:
        lines = [f"q{i}: {state}" for i, state in enumerate(self.states())]
        return "\n".join(lines)
