"""Synchronous observer hooks for simulation traces."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable

from neuroadapt_quantum.gates import Measurement, QuantumCircuit, QuantumGate
from neuroadapt_quantum.state import BlochVector, QubitState

__all__ = [
    "GATE_APPLIED", "MEASUREMENT_PERFORMED", "CIRCUIT_EXECUTED", "STATE_UPDATED",
    "GateApplied", "MeasurementPerformed", "CircuitExecuted", "StateUpdated",
    "Listener", "EventEmitter",
]

GATE_APPLIED = "gate-applied"
MEASUREMENT_PERFORMED = "measurement-performed"
CIRCUIT_EXECUTED = "circuit-executed"
STATE_UPDATED = "state-updated"


@dataclass(frozen=True)
class GateApplied:
    gate: QuantumGate
    before_state: QubitState
    after_state: QubitState


@dataclass(frozen=True)
class MeasurementPerformed:
    measurement: Measurement
    probability: float


@dataclass(frozen=True)
class CircuitExecuted:
    circuit: QuantumCircuit
    final_states: list[QubitState]


@dataclass(frozen=True)
class StateUpdated:
    qubit: int
    state: QubitState
    vector: BlochVector


Listener = Callable[[Any], None]


class EventEmitter:
    """Named-event dispatch.

    Listeners run synchronously inside ``emit`` in registration order; an
    exception from a listener propagates to whoever triggered the event.
    """
    _listeners: defaultdict[str, list[Listener]]

    def __init__(self):
        self._listeners = defaultdict(list)

    def on(self, event: str, listener: Listener) -> Listener:
        self._listeners[event].append(listener)
        return listener

    def off(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))

    def emit(self, event: str, payload: Any) -> None:
        # copy so a listener may unsubscribe itself mid-dispatch
        for listener in list(self._listeners.get(event, [])):
            listener(payload)
