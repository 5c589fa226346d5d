"""
Centralized configuration for the team generator.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# Accepted power range for player records (admin form validation)
POWER_MIN = _parse_float("POWER_MIN", 0.0)
POWER_MAX = _parse_float("POWER_MAX", 100.0)

# Upper bound on local-search passes; 0 runs until no improving swap remains
LOCAL_SEARCH_MAX_PASSES = max(0, _parse_int("LOCAL_SEARCH_MAX_PASSES", 0))

# Display precision for power differences and roster averages
POWER_DIFFERENCE_DECIMALS = 1
