"""Environment-derived defaults.

Only process-level defaults live here (worker bound, log level). Everything
that shapes a run is passed explicitly through the config contracts.
"""

from __future__ import annotations

import os


def get_default_n_jobs() -> int:
    """Default worker bound for candidate evaluation (``TUNEKIT_N_JOBS``, default 1)."""
    raw = os.getenv("TUNEKIT_N_JOBS", "1")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"TUNEKIT_N_JOBS must be an integer; got {raw!r}") from None


def get_log_level() -> str:
    return os.getenv("TUNEKIT_LOG_LEVEL", "INFO").upper()
