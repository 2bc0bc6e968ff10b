from rich.console import Console
from rich.table import Table
from rich.text import Text

from neuroadapt_quantum.simulator import QuantumCircuitSimulator
from neuroadapt_quantum.state import bloch_vector, probability


def _render_probability_bar(probability: float, width: int = 12) -> Text:
    """Render a miniature bar proportional to the probability."""
    probability = max(0.0, min(1.0, probability))
    filled = int(probability * width)
    remainder = (probability * width) - filled

    partial_steps = ["", "▏", "▎", "▍", "▌", "▋", "▊", "▉"]
    partial_index = min(len(partial_steps) - 1, int(remainder * len(partial_steps)))
    bar = "█" * filled
    if partial_index and filled < width:
        bar += partial_steps[partial_index]

    if len(bar) < width:
        bar = bar.ljust(width)

    return Text(bar)


def state_table(simulator: QuantumCircuitSimulator) -> Table:
    table = Table(show_header=True)
    table.add_column("Qubit", justify="left")
    table.add_column("Alpha", justify="right")
    table.add_column("Beta", justify="right")
    table.add_column("P(|1⟩)", justify="right")
    table.add_column("Distribution", justify="left")
    table.add_column("Bloch (x, y, z)", justify="right")

    results = simulator.get_measurement_results()
    if results:
        table.add_column("Measured", justify="center")

    for i, state in enumerate(simulator.get_all_states()):
        p1 = probability(state, 1)
        vector = bloch_vector(state)
        row = [
            f"q{i}",
            f"{state.alpha.to_builtin():.4f}",
            f"{state.beta.to_builtin():.4f}",
            f"{p1:.4f}",
            _render_probability_bar(p1),
            f"({vector.x:.2f}, {vector.y:.2f}, {vector.z:.2f})",
        ]
        if results:
            row.append(str(results.get(i, "-")))
        table.add_row(*row)

    return table


def display(simulator: QuantumCircuitSimulator, console: Console | None = None) -> None:
    """Display the register in a table, one row per qubit"""
    (console or Console()).print(state_table(simulator))
