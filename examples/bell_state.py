from neuroadapt_quantum import QuantumCircuitSimulator
from neuroadapt_quantum.display import display
from neuroadapt_quantum.logging_config import setup_logging
from neuroadapt_quantum.visualization import plot_probabilities

_ = setup_logging("INFO")

# CNOT here is a threshold rule: P(|1⟩) of the control after H is just under
# 0.5, so qubit 1 stays in |0⟩
sim = QuantumCircuitSimulator(2)
_ = sim.add_gate("H", 0)
_ = sim.add_gate("CNOT", target=1, control=0)
sim.execute_circuit()

display(sim)
_ = plot_probabilities(sim)
