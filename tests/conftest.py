"""
Shared pytest fixtures for the value-type tests.

This module provides:
- A settings override that clears the cached Settings instance
- A helper asserting pydantic dump/reconstruct round-trips
"""

import pytest
from typing import Any, Type, TypeVar
from pydantic import BaseModel

from scalars.core.config import get_settings


T = TypeVar('T', bound=BaseModel)


@pytest.fixture
def override_settings(monkeypatch):
    """Set SCALARS_* environment variables and refresh cached settings."""
    def _override(**values: Any) -> None:
        for key, value in values.items():
            monkeypatch.setenv(f"SCALARS_{key}", str(value))
        get_settings.cache_clear()

    yield _override
    monkeypatch.undo()
    get_settings.cache_clear()


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model can be dumped and rebuilt."""
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
        assert reconstructed == model
        assert reconstructed.model_dump() == serialized
        return reconstructed

    return _assert_serialization
