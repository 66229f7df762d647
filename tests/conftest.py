"""Pytest configuration and shared fixtures for nullsafe tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from nullsafe import of

    return of('hello')


@pytest.fixture
def sample_empty():
    """Sample Empty value for testing."""
    from nullsafe import empty

    return empty()


@pytest.fixture
def call_log() -> list[Any]:
    """Records the arguments a callable was invoked with."""
    return []
