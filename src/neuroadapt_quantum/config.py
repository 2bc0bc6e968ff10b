"""Environment-driven simulator settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

import torch

from neuroadapt_quantum.errors import InvalidParameterError

__all__ = ["SimulatorConfig", "ENV_SEED", "ENV_DEVICE", "ENV_LOG_LEVEL"]

ENV_SEED = "NEUROADAPT_QUANTUM_SEED"
ENV_DEVICE = "NEUROADAPT_QUANTUM_DEVICE"
ENV_LOG_LEVEL = "NEUROADAPT_QUANTUM_LOG_LEVEL"


@dataclass(frozen=True)
class SimulatorConfig:
    seed: int | None = None
    device: str = "cpu"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SimulatorConfig":
        env = os.environ if environ is None else environ

        seed: int | None = None
        raw_seed = env.get(ENV_SEED)
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise InvalidParameterError(f"{ENV_SEED} must be an integer, got {raw_seed!r}") from None

        device = env.get(ENV_DEVICE) or cls.device
        try:
            _ = torch.zeros(1, device=torch.device(device))
        except (RuntimeError, AssertionError) as exc:
            raise InvalidParameterError(f"{ENV_DEVICE} is not an available torch device: {device!r}") from exc

        log_level = (env.get(ENV_LOG_LEVEL) or cls.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise InvalidParameterError(f"{ENV_LOG_LEVEL} is not a valid log level: {log_level!r}")

        return cls(seed=seed, device=device, log_level=log_level)

    def torch_device(self) -> torch.device:
        return torch.device(self.device)
