"""Computational-basis measurement and state collapse."""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple

import torch

from neuroadapt_quantum.complex_math import ONE, ZERO
from neuroadapt_quantum.gates import Measurement
from neuroadapt_quantum.register import QubitRegister
from neuroadapt_quantum.state import QubitState, probability

__all__ = ["RandomSource", "MeasurementOutcome", "torch_random_source", "collapsed_state", "measure"]

logger = logging.getLogger(__name__)

# zero-argument callable returning a uniform sample in [0, 1)
RandomSource = Callable[[], float]


class MeasurementOutcome(NamedTuple):
    result: int
    probability: float


def torch_random_source(seed: int | None = None) -> RandomSource:
    """Uniform sampler backed by a private torch generator."""
    generator = torch.Generator()
    if seed is None:
        _ = generator.seed()
    else:
        _ = generator.manual_seed(seed)

    def draw() -> float:
        return float(torch.rand(1, generator=generator, dtype=torch.float64).item())

    return draw


def collapsed_state(result: int) -> QubitState:
    """The exact basis state left behind by a measurement; phase is discarded."""
    return QubitState(ONE, ZERO) if result == 0 else QubitState(ZERO, ONE)


def measure(register: QubitRegister, measurement: Measurement, random_source: RandomSource) -> MeasurementOutcome:
    """Note: this will collapse the measured qubit.

    The sample is compared against P(|1⟩): result is 1 iff r < p1, so a draw
    exactly equal to p1 reads 0. Collapse is always in the computational
    basis whatever ``measurement.basis`` says. ``measurement.result`` is
    filled in.
    """
    state = register.state(measurement.qubit)
    p1 = probability(state, 1)

    r = random_source()
    result = 1 if r < p1 else 0

    register.set_state(measurement.qubit, collapsed_state(result))
    measurement.result = result
    logger.debug("Measured qubit %d: p1=%.6f r=%.6f -> %d", measurement.qubit, p1, r, result)

    return MeasurementOutcome(result, p1)
