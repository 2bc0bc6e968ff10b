import seaborn as sns
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from neuroadapt_quantum.renderer import draw_sphere
from neuroadapt_quantum.simulator import QuantumCircuitSimulator
from neuroadapt_quantum.state import BlochVector, probability


def plot_results(results: dict[int, int], title: str = "Measurement Results", show: bool = True) -> tuple[Figure, Axes]:
    """Plot measured bits per qubit as a bar chart.

    Args:
        results: Mapping of qubit index to collapsed bit (from get_measurement_results)
        title: Title for the plot
        show: Whether to display the plot immediately (default: True)

    Returns:
        Tuple of (figure, axes) for further customization if needed
    """
    sorted_results = dict(sorted(results.items()))

    qubits = [f"q{i}" for i in sorted_results]
    bits = list(sorted_results.values())

    fig, ax = plt.subplots(figsize=(max(6, len(qubits) * 0.8), 4)) # pyright: ignore[reportUnknownMemberType]

    _ = sns.barplot(x=qubits, y=bits, ax=ax)

    _ = ax.set_xlabel("Qubit", fontsize=12) # pyright: ignore[reportUnknownMemberType]
    _ = ax.set_ylabel("Measured bit", fontsize=12) # pyright: ignore[reportUnknownMemberType]
    _ = ax.set_title(title, fontsize=14, fontweight='bold') # pyright: ignore[reportUnknownMemberType]
    _ = ax.set_ylim(0, 1.2)
    _ = ax.set_yticks([0, 1])

    plt.tight_layout()

    if show:
        plt.show() # pyright: ignore[reportUnknownMemberType]

    return fig, ax


def plot_probabilities(simulator: QuantumCircuitSimulator, title: str = "P(|1⟩) per Qubit", show: bool = True) -> tuple[Figure, Axes]:
    """Plot each qubit's probability of reading 1.

    Args:
        simulator: Simulator whose current register is plotted
        title: Title for the plot
        show: Whether to display the plot immediately (default: True)

    Returns:
        Tuple of (figure, axes) for further customization if needed
    """
    probs = [probability(state, 1) for state in simulator.get_all_states()]
    qubits = [f"q{i}" for i in range(len(probs))]

    fig, ax = plt.subplots(figsize=(max(6, len(qubits) * 0.8), 4)) # pyright: ignore[reportUnknownMemberType]

    _ = sns.barplot(x=qubits, y=probs, ax=ax)

    _ = ax.set_xlabel("Qubit", fontsize=12) # pyright: ignore[reportUnknownMemberType]
    _ = ax.set_ylabel("Probability of |1⟩", fontsize=12) # pyright: ignore[reportUnknownMemberType]
    _ = ax.set_title(title, fontsize=14, fontweight='bold') # pyright: ignore[reportUnknownMemberType]
    _ = ax.set_ylim(0, 1.0)

    # Only label non-negligible probabilities
    for i, prob in enumerate(probs):
        if prob > 0.01:
            _ = ax.text(i, prob, f'{prob:.3f}', ha='center', va='bottom', fontsize=10) # pyright: ignore[reportUnknownMemberType]

    plt.tight_layout()

    if show:
        plt.show() # pyright: ignore[reportUnknownMemberType]

    return fig, ax


def plot_bloch_vector(vector: BlochVector | tuple[float, float, float], title: str = "", show: bool = True) -> tuple[Figure, Axes]:
    """Plot a single Bloch vector (x, y, z) on the unit sphere."""
    if len(vector) != 3:
        raise ValueError("Bloch vector must have exactly 3 components")
    x, y, z = vector

    fig = plt.figure(figsize=(6, 6))
    ax = fig.add_subplot(111, projection='3d')
    draw_sphere(ax)

    _ = ax.quiver(0, 0, 0, x, y, z, color='r', arrow_length_ratio=0.1, linewidth=2)

    if title:
        _ = ax.set_title(title)

    if show:
        plt.show() # pyright: ignore[reportUnknownMemberType]

    return fig, ax
