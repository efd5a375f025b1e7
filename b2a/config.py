# config.py — Constants for the B2A goal-planning engine
from __future__ import annotations

from typing import Dict, List

# ─────────────────────────────────────────────
# NATURAL RETURN TABLE (annual %, keyed by risk profile)
# Bump RATE_TABLE_VERSION whenever a rate changes.
# ─────────────────────────────────────────────
RATE_TABLE_VERSION = "2024.1"

RISK_PROFILE_RETURNS: Dict[str, float] = {
    "conservative": 8.0,
    "moderate": 10.0,
    "aggressive": 12.0,
    "veryAggressive": 14.0,
}

RISK_PROFILE_LABELS: Dict[str, str] = {
    "conservative": "Conservative",
    "moderate": "Moderate",
    "aggressive": "Aggressive",
    "veryAggressive": "Very Aggressive",
}

# ─────────────────────────────────────────────
# HORIZONS
# ─────────────────────────────────────────────
MAX_TIMELINE_YEARS = 80          # search horizon for the what-if solver
MIN_PROJECTION_YEARS = 10        # natural growth curve is never shorter
MAX_REVERSE_SPAN_YEARS = 50      # what-if retirement age range

# ─────────────────────────────────────────────
# PROJECTION SCENARIOS (annual % around the expected return)
# ─────────────────────────────────────────────
OPTIMISTIC_BONUS = 2.0
PESSIMISTIC_PENALTY = 2.0

# ─────────────────────────────────────────────
# ALLOCATION
# ─────────────────────────────────────────────
ALLOCATION_TOLERANCE = 0.01      # percentage points

ASSET_CLASSES: List[dict] = [
    {"id": 1, "name": "Equity", "color": "#3b82f6"},
    {"id": 2, "name": "Debt", "color": "#10b981"},
    {"id": 3, "name": "Gold", "color": "#f59e0b"},
    {"id": 4, "name": "Real Estate", "color": "#f97316"},
    {"id": 5, "name": "Alternative", "color": "#8b5cf6"},
]

# Percentages and returns line up with ASSET_CLASSES.
ALLOCATION_TEMPLATES: Dict[str, dict] = {
    "conservative": {"percentages": [30, 40, 15, 10, 5], "returns": [12, 7, 8, 9, 10]},
    "moderate": {"percentages": [50, 25, 10, 10, 5], "returns": [12, 8, 8, 9, 11]},
    "aggressive": {"percentages": [65, 15, 5, 10, 5], "returns": [14, 8, 8, 10, 12]},
    "veryAggressive": {"percentages": [75, 10, 5, 5, 5], "returns": [15, 8, 8, 10, 14]},
}

# ─────────────────────────────────────────────
# SEED PLAN
# ─────────────────────────────────────────────
DEFAULT_PLAN = {
    "current_wealth": 1_500_000.0,
    "target_wealth": 50_000_000.0,
    "current_age": 30,
    "risk_profile": "moderate",
}
