"""
Shared pytest fixtures and utilities for the densealgebra test suite.

This module provides:
- A seeded NumPy generator so random constructions are reproducible
- Settings overrides that reset the cached configuration
- Helpers for comparing matrices and checking Pydantic round-trips
"""

import numpy as np
import pytest
from typing import Any, Type, TypeVar
from pydantic import BaseModel

from densealgebra.core.config import get_settings


T = TypeVar('T', bound=BaseModel)


@pytest.fixture
def rng():
    """Deterministic NumPy generator."""
    return np.random.default_rng(20240601)


@pytest.fixture
def override_settings(monkeypatch):
    """Override settings through environment variables for one test."""
    def _override(**values: Any):
        for key, value in values.items():
            monkeypatch.setenv(f"DENSEALGEBRA_{key}", str(value))
        get_settings.cache_clear()
        return get_settings()

    yield _override
    get_settings.cache_clear()


@pytest.fixture
def assert_matrix_close():
    """Assert two matrices (or nested lists) agree element-wise within tolerance."""
    def _assert_close(actual, expected, tol: float = 1e-9) -> None:
        actual_rows = actual.to_python() if hasattr(actual, "to_python") else actual
        expected_rows = expected.to_python() if hasattr(expected, "to_python") else expected
        assert np.shape(actual_rows) == np.shape(expected_rows), (
            f"Shapes differ: {np.shape(actual_rows)} != {np.shape(expected_rows)}"
        )
        assert np.allclose(actual_rows, expected_rows, rtol=0, atol=tol), (
            f"Matrices differ:\n{actual_rows}\n!=\n{expected_rows}"
        )

    return _assert_close


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model can be serialized and deserialized."""
    def _assert_serialization(model: BaseModel, model_class: Type[T]) -> T:
        """
        Assert that a model can be serialized to dict and reconstructed.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction

        Returns:
            The reconstructed model
        """
        serialized = model.model_dump()
        reconstructed = model_class(**serialized)
        assert reconstructed.model_dump() == serialized
        return reconstructed

    return _assert_serialization


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
