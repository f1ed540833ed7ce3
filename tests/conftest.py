from __future__ import annotations

import logging

import numpy as np
import pytest

from cachematrix.solvers.inverse import invert


@pytest.fixture
def example_matrix() -> np.ndarray:
    return np.array([
        [0.0, 0.0, 1.0],
        [2.0, -1.0, 3.0],
        [1.0, 1.0, 4.0],
    ])


@pytest.fixture
def expected_inverse() -> np.ndarray:
    return np.array([
        [-7 / 3, 1 / 3, 1 / 3],
        [-5 / 3, -1 / 3, 2 / 3],
        [1.0, 0.0, 0.0],
    ])


class CountingInverter:
    """Wraps :func:`invert` and records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, dict]] = []

    def __call__(self, matrix, **options):
        self.calls.append((matrix, options))
        return invert(matrix, **options)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting_inverter() -> CountingInverter:
    return CountingInverter()


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handler/level changes made by setup_logging during a test."""
    logger = logging.getLogger("cachematrix")
    handlers = list(logger.handlers)
    level = logger.level
    try:
        yield
    finally:
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers[:] = handlers
        logger.setLevel(level)
