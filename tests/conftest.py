"""Pytest configuration and shared fixtures for warm-fuzzy-thing tests."""

from __future__ import annotations

from typing import Any

import pytest
from warm_fuzzy_thing._logging import add_log_hook, clear_log_hooks


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from warm_fuzzy_thing import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from warm_fuzzy_thing import Failure

    return Failure('not_found')


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from warm_fuzzy_thing import Present

    return Present('hello')


@pytest.fixture
def sample_absent():
    """Sample Absent value for testing."""
    from warm_fuzzy_thing import Absent

    return Absent


def _explode(*args: Any) -> Any:
    raise AssertionError(f'callback must not be called, got {args!r}')


@pytest.fixture
def explode():
    """A callback that fails the test if it is ever invoked."""
    return _explode


@pytest.fixture
def log_events():
    """Capture log event dicts emitted while the test runs."""
    events: list[dict[str, Any]] = []
    clear_log_hooks()
    add_log_hook(events.append)
    yield events
    clear_log_hooks()
