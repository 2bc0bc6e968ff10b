"""Circuit simulator over independent single-qubit states."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from typing_extensions import override

import torch

from neuroadapt_quantum import events
from neuroadapt_quantum.config import SimulatorConfig
from neuroadapt_quantum.errors import InvalidParameterError
from neuroadapt_quantum.events import EventEmitter
from neuroadapt_quantum.gates import (
    TWO_QUBIT_GATES, Measurement, QuantumCircuit, QuantumGate, custom_matrix, gate_matrix,
)
from neuroadapt_quantum.measurement import RandomSource, measure, torch_random_source
from neuroadapt_quantum.register import QubitRegister
from neuroadapt_quantum.state import BlochVector, QubitState, bloch_vector, probability

if TYPE_CHECKING:
    from neuroadapt_quantum.renderer import StateRenderer

__all__ = ["QuantumCircuitSimulator", "CNOT_THRESHOLD", "MEASUREMENT_BASES"]

logger = logging.getLogger(__name__)

# control P(|1⟩) must be strictly above this for CNOT to flip the target
CNOT_THRESHOLD = 0.5

MEASUREMENT_BASES = frozenset({"computational", "x", "y", "z"})


class QuantumCircuitSimulator(EventEmitter):
    """Author a circuit, execute it, then query the resulting qubit states.

    Qubits are simulated as independent amplitude pairs. CNOT is a threshold
    rule on the control's |1⟩ probability, so no entanglement is formed.

    Usage:
        sim = QuantumCircuitSimulator(2)
        sim.add_gate("H", 0)
        sim.add_measurement(0)
        sim.execute_circuit()
        sim.get_measurement_results()  # {0: 0} or {0: 1}
    """
    config: SimulatorConfig
    random_source: RandomSource
    _register: QubitRegister
    _circuit: QuantumCircuit
    _measurement_results: dict[int, int]

    def __init__(
        self,
        qubit_count: int,
        *,
        random_source: RandomSource | None = None,
        config: SimulatorConfig | None = None,
    ):
        super().__init__()
        self.config = config if config is not None else SimulatorConfig.from_env()
        self.random_source = random_source if random_source is not None else torch_random_source(self.config.seed)

        self._register = QubitRegister(qubit_count, device=self.config.torch_device())
        self._circuit = QuantumCircuit(qubit_count)
        self._measurement_results = {}

    @property
    def qubit_count(self) -> int:
        return self._circuit.qubits

    # ---- authoring ----

    def add_gate(
        self,
        gate_type: str | Mapping[str, Any],
        target: int | None = None,
        control: int | None = None,
        angle: float | None = None,
        matrix: torch.Tensor | Sequence[Sequence[complex]] | None = None,
    ) -> QuantumGate:
        """Queue a gate. Its matrix is derived now, not at execution.

        ``gate_type`` may also be a mapping such as
        ``{"type": "RY", "target": 0, "angle": math.pi / 4}``.
        Qubit indices are checked when the circuit runs.
        """
        if isinstance(gate_type, Mapping):
            spec = gate_type
            if "type" not in spec:
                raise InvalidParameterError("Gate mapping requires type parameter")
            gate_type = spec["type"]
            target = spec.get("target", target)
            control = spec.get("control", control)
            angle = spec.get("angle", angle)
            matrix = spec.get("matrix", matrix)

        if target is None:
            raise InvalidParameterError(f"{gate_type} gate requires target parameter")

        if gate_type == "CUSTOM":
            if matrix is None:
                raise InvalidParameterError("CUSTOM gate requires matrix parameter")
            gate_tensor: torch.Tensor | None = custom_matrix(matrix)
        elif gate_type in TWO_QUBIT_GATES:
            if control is None:
                raise InvalidParameterError(f"{gate_type} gate requires control parameter")
            gate_tensor = gate_matrix("X") if gate_type == "CNOT" else None
        else:
            gate_tensor = gate_matrix(gate_type, angle)

        gate = QuantumGate(type=gate_type, target=target, control=control, angle=angle, matrix=gate_tensor)
        self._circuit.gates.append(gate)
        return gate.copy()

    def add_measurement(self, qubit: int, basis: str = "computational") -> Measurement:
        if basis not in MEASUREMENT_BASES:
            raise InvalidParameterError(f"Unknown measurement basis: {basis}")

        measurement = Measurement(qubit=qubit, basis=basis)
        self._circuit.measurements.append(measurement)
        return measurement.copy()

    # ---- execution ----

    def execute_circuit(self) -> None:
        """Apply every queued gate, then every queued measurement, in order.

        A bad qubit index stops execution at the offending operation; the
        operations before it have already been applied.
        """
        logger.info(
            "Executing circuit: %d qubits, %d gates, %d measurements",
            self.qubit_count, len(self._circuit.gates), len(self._circuit.measurements),
        )

        for gate in self._circuit.gates:
            self._apply_gate(gate)

        for measurement in self._circuit.measurements:
            outcome = measure(self._register, measurement, self.random_source)
            self._measurement_results[measurement.qubit] = outcome.result
            payload = events.MeasurementPerformed(measurement.copy(), outcome.probability)
            self.emit(events.MEASUREMENT_PERFORMED, payload)

        self.emit(events.CIRCUIT_EXECUTED, events.CircuitExecuted(self.get_circuit(), self.get_all_states()))

    def _apply_gate(self, gate: QuantumGate) -> None:
        before_state = self._register.state(gate.target)

        if gate.type == "CNOT":
            self._apply_cnot(gate)
        elif gate.type == "SWAP":
            assert gate.control is not None
            self._register.swap(gate.control, gate.target)
        else:
            assert gate.matrix is not None
            self._register.apply(gate.target, gate.matrix)

        after_state = self._register.state(gate.target)
        logger.debug("Applied %s to qubit %d: %s -> %s", gate.type, gate.target, before_state, after_state)
        self.emit(events.GATE_APPLIED, events.GateApplied(gate.copy(), before_state, after_state))

    def _apply_cnot(self, gate: QuantumGate) -> None:
        # threshold rule, not a joint-state update
        assert gate.control is not None and gate.matrix is not None
        control_state = self._register.state(gate.control)
        if probability(control_state, 1) > CNOT_THRESHOLD:
            self._register.apply(gate.target, gate.matrix)

    # ---- queries ----

    def get_qubit_state(self, index: int) -> QubitState:
        return self._register.state(index)

    def get_all_states(self) -> list[QubitState]:
        return self._register.states()

    def get_bloch_vector(self, index: int) -> BlochVector:
        return bloch_vector(self.get_qubit_state(index))

    def get_circuit(self) -> QuantumCircuit:
        return self._circuit.copy()

    def get_measurement_results(self) -> dict[int, int]:
        return dict(self._measurement_results)

    def publish_state(self, renderer: StateRenderer, index: int) -> None:
        """Hand one qubit's current state to a renderer."""
        renderer.update_state(self.get_qubit_state(index))

    def reset(self) -> None:
        self._circuit.gates.clear()
        self._circuit.measurements.clear()
        self._measurement_results.clear()
        self._register.reset()

    @override
    def __repr__(self) -> str:
        return f"QuantumCircuitSimulator({self.qubit_count} qubits)\n{self._register!r}"
