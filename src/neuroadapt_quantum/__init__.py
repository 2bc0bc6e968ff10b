from neuroadapt_quantum.simulator import QuantumCircuitSimulator
from neuroadapt_quantum import gates
from neuroadapt_quantum.gates import QuantumGate, Measurement, QuantumCircuit, gate_matrix
from neuroadapt_quantum.complex_math import Complex
from neuroadapt_quantum.state import (
    QubitState, BlochVector, bloch_vector, probability, describe_bloch_vector,
    create_qubit_state, ground_state, excited_state, superposition_state,
)
from neuroadapt_quantum.config import SimulatorConfig
from neuroadapt_quantum.errors import QuantumError, InvalidParameterError, UnsupportedGateError, QubitIndexError

__version__ = "1.1.0"
__all__ = [
    "QuantumCircuitSimulator", "gates", "QuantumGate", "Measurement", "QuantumCircuit", "gate_matrix",
    "Complex", "QubitState", "BlochVector", "bloch_vector", "probability", "describe_bloch_vector",
    "create_qubit_state", "ground_state", "excited_state", "superposition_state",
    "SimulatorConfig", "QuantumError", "InvalidParameterError", "UnsupportedGateError", "QubitIndexError",
]
