from __future__ import annotations

import unittest

from neuroadapt_quantum.gates import H, Measurement
from neuroadapt_quantum.measurement import collapsed_state, measure, torch_random_source
from neuroadapt_quantum.register import QubitRegister
from neuroadapt_quantum.state import create_qubit_state, excited_state, ground_state


class RandomSourceTests(unittest.TestCase):
    def test_seeded_source_is_deterministic(self) -> None:
        a, b = torch_random_source(7), torch_random_source(7)
        self.assertEqual([a() for _ in range(5)], [b() for _ in range(5)])

    def test_samples_in_unit_interval(self) -> None:
        draw = torch_random_source()
        for _ in range(100):
            r = draw()
            self.assertGreaterEqual(r, 0.0)
            self.assertLess(r, 1.0)


class CollapseTests(unittest.TestCase):
    def test_collapsed_states(self) -> None:
        self.assertEqual(collapsed_state(0), ground_state())
        self.assertEqual(collapsed_state(1), excited_state())

    def test_phase_is_discarded(self) -> None:
        register = QubitRegister(1)
        register.set_state(0, create_qubit_state(0.6j, -0.8j))
        measurement = Measurement(0)

        outcome = measure(register, measurement, lambda: 0.1)

        self.assertEqual(outcome.result, 1)
        self.assertAlmostEqual(outcome.probability, 0.64)
        self.assertEqual(measurement.result, 1)
        self.assertEqual(register.state(0), excited_state())

    def test_only_measured_qubit_collapses(self) -> None:
        register = QubitRegister(2)
        register.apply(0, H)
        register.apply(1, H)

        _ = measure(register, Measurement(1), lambda: 0.9)

        self.assertEqual(register.state(1), ground_state())
        self.assertAlmostEqual(register.state(0).beta.real, 2 ** -0.5)

    def test_non_computational_basis_collapses_computationally(self) -> None:
        register = QubitRegister(1)
        register.set_state(0, excited_state())
        outcome = measure(register, Measurement(0, basis="x"), lambda: 0.5)
        self.assertEqual(outcome.result, 1)


class RegisterTests(unittest.TestCase):
    def test_swap_and_repr(self) -> None:
        register = QubitRegister(2)
        register.set_state(0, excited_state())
        register.swap(0, 1)
        self.assertEqual(register.states(), [ground_state(), excited_state()])
        self.assertEqual(repr(register), "q0: |ψ⟩ = 1.0000|0⟩\nq1: |ψ⟩ = 1.0000|1⟩")

    def test_reset(self) -> None:
        register = QubitRegister(3)
        register.apply(2, H)
        register.reset()
        self.assertEqual(register.states(), [ground_state()] * 3)
        self.assertEqual(len(register), 3)


if __name__ == "__main__":
    unittest.main()
