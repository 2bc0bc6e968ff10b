from __future__ import annotations

import unittest

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from rich.console import Console  # noqa: E402

from neuroadapt_quantum import QuantumCircuitSimulator, SimulatorConfig  # noqa: E402
from neuroadapt_quantum import events  # noqa: E402
from neuroadapt_quantum.display import _render_probability_bar, display  # noqa: E402
from neuroadapt_quantum.renderer import BlochSphereView, StateRenderer  # noqa: E402
from neuroadapt_quantum.state import BlochVector, excited_state, ground_state  # noqa: E402
from neuroadapt_quantum.visualization import plot_bloch_vector, plot_probabilities, plot_results  # noqa: E402


class PlotTests(unittest.TestCase):
    def tearDown(self) -> None:
        plt.close("all")

    def test_plot_probabilities(self) -> None:
        sim = QuantumCircuitSimulator(3, config=SimulatorConfig(seed=0))
        sim.add_gate("X", 1)
        sim.add_gate("H", 2)
        sim.execute_circuit()

        fig, ax = plot_probabilities(sim, show=False)
        fig.canvas.draw()
        self.assertEqual(ax.get_ylim(), (0.0, 1.0))
        self.assertEqual([t.get_text() for t in ax.get_xticklabels()], ["q0", "q1", "q2"])

    def test_plot_results(self) -> None:
        fig, ax = plot_results({1: 1, 0: 0}, show=False)
        fig.canvas.draw()
        self.assertEqual([t.get_text() for t in ax.get_xticklabels()], ["q0", "q1"])
        self.assertIs(ax.figure, fig)

    def test_plot_bloch_vector(self) -> None:
        _, ax = plot_bloch_vector(BlochVector(0.0, 0.0, 1.0), title="|0⟩", show=False)
        self.assertEqual(ax.get_title(), "|0⟩")
        with self.assertRaises(ValueError):
            plot_bloch_vector((1.0, 0.0), show=False)  # type: ignore[arg-type]


class BlochSphereViewTests(unittest.TestCase):
    def setUp(self) -> None:
        self.view = BlochSphereView(qubit=1)

    def tearDown(self) -> None:
        self.view.close()

    def test_is_a_state_renderer(self) -> None:
        self.assertIsInstance(self.view, StateRenderer)

    def test_update_state_announces_and_emits(self) -> None:
        seen: list[events.StateUpdated] = []
        self.view.on(events.STATE_UPDATED, seen.append)

        with self.assertLogs("neuroadapt_quantum.renderer", level="INFO"):
            self.view.update_state(excited_state())

        self.assertEqual(self.view.vector, BlochVector(0.0, 0.0, -1.0))
        self.assertEqual(
            self.view.last_announcement,
            "Quantum state updated. Bloch vector at coordinates: X 0.00, Y 0.00, Z -1.00. Magnitude: 1.00",
        )
        self.assertEqual(len(seen), 1)
        self.assertEqual(seen[0].qubit, 1)
        self.assertEqual(seen[0].state, excited_state())

    def test_announcements_can_be_disabled(self) -> None:
        view = BlochSphereView(announce_state_changes=False)
        try:
            view.update_state(ground_state())
            view.update_state(excited_state())
            self.assertIsNone(view.last_announcement)
            self.assertEqual(view.vector, BlochVector(0.0, 0.0, -1.0))
        finally:
            view.close()

    def test_simulator_publishes_to_view(self) -> None:
        sim = QuantumCircuitSimulator(2, config=SimulatorConfig(seed=0))
        sim.add_gate("H", 1)
        sim.execute_circuit()
        sim.publish_state(self.view, 1)

        assert self.view.vector is not None
        self.assertAlmostEqual(self.view.vector.x, 1.0)


class DisplayTests(unittest.TestCase):
    def test_probability_bar(self) -> None:
        self.assertEqual(_render_probability_bar(1.0, width=4).plain, "████")
        self.assertEqual(_render_probability_bar(0.0, width=4).plain, "    ")
        self.assertEqual(_render_probability_bar(0.5, width=4).plain, "██  ")

    def test_display_table(self) -> None:
        sim = QuantumCircuitSimulator(2, random_source=lambda: 0.0)
        sim.add_gate("X", 0)
        sim.add_measurement(0)
        sim.execute_circuit()

        console = Console(record=True, width=160)
        display(sim, console)
        text = console.export_text()

        self.assertIn("q0", text)
        self.assertIn("q1", text)
        self.assertIn("1.0000", text)
        self.assertIn("(0.00, 0.00, -1.00)", text)
        self.assertIn("Measured", text)


if __name__ == "__main__":
    unittest.main()
