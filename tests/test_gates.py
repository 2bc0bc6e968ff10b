from __future__ import annotations

import math
import unittest

import torch

from neuroadapt_quantum import gates
from neuroadapt_quantum.errors import InvalidParameterError, UnsupportedGateError
from neuroadapt_quantum.gates import custom_matrix, gate_matrix


def is_unitary(matrix: torch.Tensor) -> bool:
    return torch.allclose(matrix.conj().T @ matrix, gates.I, atol=1e-12)


class GateMatrixTests(unittest.TestCase):
    def test_fixed_gates_are_unitary(self) -> None:
        for gate_type in ("X", "Y", "Z", "H", "S", "T"):
            matrix = gate_matrix(gate_type)
            self.assertEqual(matrix.shape, (2, 2))
            self.assertEqual(matrix.dtype, torch.complex128)
            self.assertTrue(is_unitary(matrix), gate_type)

    def test_rotation_gates_are_unitary(self) -> None:
        for gate_type in ("RX", "RY", "RZ"):
            for theta in (0.0, math.pi / 4, math.pi, -2.5):
                self.assertTrue(is_unitary(gate_matrix(gate_type, theta)), (gate_type, theta))

    def test_hadamard_entries(self) -> None:
        s = 1 / math.sqrt(2)
        expected = torch.tensor([[s, s], [s, -s]], dtype=torch.complex128)
        self.assertTrue(torch.equal(gate_matrix("H"), expected))

    def test_t_gate_phase(self) -> None:
        phase = complex(gate_matrix("T")[1, 1].item())
        self.assertAlmostEqual(phase.real, math.cos(math.pi / 4))
        self.assertAlmostEqual(phase.imag, math.sin(math.pi / 4))

    def test_ry_entries(self) -> None:
        theta = 0.8
        matrix = gate_matrix("RY", theta)
        self.assertEqual(complex(matrix[0, 0].item()), complex(math.cos(theta / 2), 0))
        self.assertEqual(complex(matrix[0, 1].item()), complex(-math.sin(theta / 2), 0))
        self.assertEqual(complex(matrix[1, 0].item()), complex(math.sin(theta / 2), 0))

    def test_rotation_requires_angle(self) -> None:
        for gate_type in ("RX", "RY", "RZ"):
            with self.assertRaisesRegex(InvalidParameterError, f"{gate_type} gate requires angle parameter"):
                gate_matrix(gate_type)

    def test_unsupported(self) -> None:
        for gate_type in ("CNOT", "SWAP", "CUSTOM", "U3", "h"):
            with self.assertRaises(UnsupportedGateError):
                gate_matrix(gate_type)

    def test_returned_matrix_is_not_shared(self) -> None:
        matrix = gate_matrix("X")
        matrix[0, 0] = 5
        self.assertEqual(complex(gate_matrix("X")[0, 0].item()), 0j)


class CustomMatrixTests(unittest.TestCase):
    def test_accepts_unitary(self) -> None:
        matrix = custom_matrix([[0, -1j], [1j, 0]])
        self.assertTrue(torch.equal(matrix, gates.Y))

    def test_accepts_tensor(self) -> None:
        matrix = custom_matrix(torch.eye(2))
        self.assertEqual(matrix.dtype, torch.complex128)

    def test_rejects_wrong_shape(self) -> None:
        with self.assertRaisesRegex(InvalidParameterError, "must be 2x2"):
            custom_matrix([[1, 0, 0], [0, 1, 0]])

    def test_rejects_flat_list(self) -> None:
        with self.assertRaises(InvalidParameterError):
            custom_matrix([1, 0, 0, 1])  # type: ignore[list-item]

    def test_rejects_ragged_rows(self) -> None:
        with self.assertRaises(InvalidParameterError):
            custom_matrix([[1, 0], [0]])

    def test_tensor_input_is_copied(self) -> None:
        source = torch.eye(2, dtype=torch.complex128)
        matrix = custom_matrix(source)
        _ = source.zero_()
        self.assertTrue(torch.equal(matrix, gates.I))

    def test_rejects_non_unitary(self) -> None:
        with self.assertRaisesRegex(InvalidParameterError, "not unitary"):
            custom_matrix([[2, 0], [0, 1]])


if __name__ == "__main__":
    unittest.main()
