"""Logging setup for applications embedding the simulator."""

from __future__ import annotations

import logging

from neuroadapt_quantum.config import SimulatorConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "neuroadapt_quantum"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Log level name; defaults to NEUROADAPT_QUANTUM_LOG_LEVEL

    Returns:
        The configured package logger
    """
    if level is None:
        level = SimulatorConfig.from_env().log_level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # repeated calls must not stack handlers
    if not any(getattr(h, "_neuroadapt_quantum", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._neuroadapt_quantum = True  # type: ignore[attr-defined]
        logger.addHandler(console_handler)

    return logger
