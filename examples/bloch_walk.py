import math

from neuroadapt_quantum import QuantumCircuitSimulator, events
from neuroadapt_quantum.logging_config import setup_logging
from neuroadapt_quantum.renderer import BlochSphereView

_ = setup_logging("INFO")

view = BlochSphereView(qubit=0, interactive=True)
sim = QuantumCircuitSimulator(1)
_ = sim.on(events.GATE_APPLIED, lambda e: view.update_state(e.after_state))

# walk the qubit from |0⟩ around the sphere in eighth turns
for _ in range(8):
    _ = sim.add_gate("RY", 0, angle=math.pi / 4)
_ = sim.add_gate("H", 0)
_ = sim.add_gate("S", 0)
_ = sim.add_measurement(0)
sim.execute_circuit()

print(f"Measured: {sim.get_measurement_results()[0]}")
