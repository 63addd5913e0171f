"""Shared fixtures for maybe-pydantic tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def valid_user() -> dict[str, Any]:
    return {"name": "Alice", "age": 30, "email": "alice@example.com"}


@pytest.fixture
def invalid_user() -> dict[str, Any]:
    """Violates three independent rules: name length, age sign, email format."""
    return {"name": "A", "age": -5, "email": "invalid"}
