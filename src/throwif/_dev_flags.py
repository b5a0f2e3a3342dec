"""Internal helpers for development-time feature flags.

Keeps environment handling in one place so semantics stay consistent and
tests can override without touching ``os.environ``.
"""

from __future__ import annotations

import os

from throwif.constants import TRACE_FAILURES_VAR

__all__ = ["trace_failures_enabled"]


def trace_failures_enabled(*, override: bool | None = None) -> bool:
    """Return True when failing checks should emit a debug record.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``THROWIF_TRACE_FAILURES`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv(TRACE_FAILURES_VAR) == "1"
