"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_throwif_env(request, monkeypatch):
    """Clear THROWIF_* env vars so flags start from their defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("THROWIF_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def trace_failures(monkeypatch):
    """Enable debug records for failing checks (not autouse)."""
    monkeypatch.setenv("THROWIF_TRACE_FAILURES", "1")


@pytest.fixture
def restore_zero_values():
    """Snapshot and restore the zero value registry around a test (not autouse)."""
    from throwif import defaults

    saved = dict(defaults._FACTORIES)
    yield
    defaults._FACTORIES.clear()
    defaults._FACTORIES.update(saved)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("hypothesis").setLevel(logging.WARNING)
