"""Renderer contract and a live matplotlib Bloch sphere."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from neuroadapt_quantum import events
from neuroadapt_quantum.events import EventEmitter
from neuroadapt_quantum.state import BlochVector, QubitState, bloch_vector, describe_bloch_vector

__all__ = ["StateRenderer", "BlochSphereView", "draw_sphere"]

logger = logging.getLogger(__name__)


@runtime_checkable
class StateRenderer(Protocol):
    def update_state(self, qubit_state: QubitState) -> None: ...


def draw_sphere(ax) -> None:
    """Wireframe unit sphere with axes, equator and |0⟩/|1⟩ pole labels."""
    u = np.linspace(0, 2 * np.pi, 60)
    v = np.linspace(0, np.pi, 60)
    x = np.outer(np.cos(u), np.sin(v))
    y = np.outer(np.sin(u), np.sin(v))
    z = np.outer(np.ones(np.size(u)), np.cos(v))
    ax.plot_surface(x, y, z, color="aliceblue", alpha=0.1, edgecolor="none")

    ax.plot([-1, 1], [0, 0], [0, 0], "k-", alpha=0.2)
    ax.plot([0, 0], [-1, 1], [0, 0], "k-", alpha=0.2)
    ax.plot([0, 0], [0, 0], [-1, 1], "k-", alpha=0.2)

    theta = np.linspace(0, 2 * np.pi, 100)
    ax.plot(np.cos(theta), np.sin(theta), np.zeros(100), "k--", alpha=0.2)

    ax.text(1.1, 0, 0, "x")
    ax.text(0, 1.1, 0, "y")
    ax.text(0, 0, 1.2, "|0⟩")
    ax.text(0, 0, -1.2, "|1⟩")

    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_zticks([])
    ax.set_box_aspect([1, 1, 1])


class BlochSphereView(EventEmitter):
    """Single-qubit Bloch sphere that redraws its arrow on every update.

    Each update is announced through the module logger (and kept in
    ``last_announcement``) and emitted as a ``state-updated`` event.
    """
    fig: Figure
    qubit: int
    announce_state_changes: bool
    vector: BlochVector | None
    last_announcement: str | None

    def __init__(self, qubit: int = 0, *, announce_state_changes: bool = True, interactive: bool = False,
                 color: str = "r"):
        super().__init__()
        self.qubit = qubit
        self.announce_state_changes = announce_state_changes
        self.interactive = interactive
        self.color = color
        self.vector = None
        self.last_announcement = None
        self._arrow = None

        if interactive:
            plt.ion()
        self.fig = plt.figure(figsize=(6, 6))
        self.ax = self.fig.add_subplot(111, projection="3d")
        draw_sphere(self.ax)
        self.ax.set_title(f"Qubit {qubit}")

        if interactive:
            self.fig.canvas.draw()
            plt.show(block=False)

    def update_state(self, qubit_state: QubitState) -> None:
        vector = bloch_vector(qubit_state)
        self._draw_vector(vector)
        self.vector = vector

        if self.announce_state_changes:
            self.last_announcement = describe_bloch_vector(vector)
            logger.info(self.last_announcement)

        self.emit(events.STATE_UPDATED, events.StateUpdated(self.qubit, qubit_state, vector))

    def _draw_vector(self, vector: BlochVector) -> None:
        if self._arrow is not None:
            self._arrow.remove()
        self._arrow = self.ax.quiver(0, 0, 0, vector.x, vector.y, vector.z,
                                     color=self.color, arrow_length_ratio=0.1, linewidth=2)

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def close(self) -> None:
        plt.close(self.fig)
