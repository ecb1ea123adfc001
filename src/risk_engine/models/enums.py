"""Enumerations and default thresholds for the injury risk engine.

Thresholds are grouped by the detector that uses them. The values here are
only defaults; the engine reads them through ``RiskThresholds`` so a caller
can override any single value.
"""

from enum import Enum, IntEnum


class Severity(IntEnum):
    """Severity of a single risk factor (higher value = more severe)."""

    LOW = 1
    MODERATE = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.lower()


class RiskLevel(IntEnum):
    """Overall risk category of an assessment."""

    LOW = 1
    MODERATE = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        return self.name.lower()


class FactorType(str, Enum):
    """Tags for the conditions the detectors can report."""

    TRAINING_LOAD_SPIKE = "training_load_spike"
    MILEAGE_SPIKE = "mileage_spike"
    LOW_RECOVERY = "low_recovery"
    POOR_SLEEP = "poor_sleep"
    HIGH_STRESS = "high_stress"
    HIGH_SORENESS = "high_soreness"
    NO_REST_DAYS = "no_rest_days"


# ---------------------------------------------------------------------------
# Week-over-week load change (percent increase)
# Gabbett (2016): spikes well above the 10% rule precede most soft-tissue injury
# ---------------------------------------------------------------------------
VOLUME_SPIKE_MODERATE_PCT = 30.0
VOLUME_SPIKE_HIGH_PCT = 50.0

# Running mileage is tracked separately from strength volume
MILEAGE_SPIKE_MODERATE_PCT = 30.0
MILEAGE_SPIKE_HIGH_PCT = 50.0

# ---------------------------------------------------------------------------
# Wellness averages (0-100 scales, sleep in hours)
# ---------------------------------------------------------------------------
LOW_RECOVERY_THRESHOLD = 50.0   # <50 → factor
LOW_RECOVERY_HIGH = 40.0        # <40 → high

POOR_SLEEP_THRESHOLD_H = 6.5    # <6.5 h → factor
POOR_SLEEP_HIGH_H = 5.5         # <5.5 h → high

HIGH_STRESS_THRESHOLD = 70.0    # >70 → factor
HIGH_STRESS_HIGH = 80.0         # >80 → high

HIGH_SORENESS_THRESHOLD = 70.0
HIGH_SORENESS_HIGH = 80.0

# ---------------------------------------------------------------------------
# Rest days
# ---------------------------------------------------------------------------
NO_REST_MODERATE_DAYS = 6       # >=6 consecutive training days → moderate
NO_REST_HIGH_DAYS = 8           # >=8 → high

# ---------------------------------------------------------------------------
# Score composition
# ---------------------------------------------------------------------------
HIGH_POINTS = 25
MODERATE_POINTS = 12
LOW_POINTS = 5  # no detector emits LOW yet

# Flat bonus when this many factors co-occur
COMPOUND_FACTOR_COUNT = 3
COMPOUND_BONUS_POINTS = 15

MAX_RISK_SCORE = 100

# Minimum score for each category (checked from the top down)
CRITICAL_SCORE = 70
HIGH_SCORE = 50
MODERATE_SCORE = 25

# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------
WINDOW_DAYS = 7
STREAK_LOOKBACK_DAYS = 28
METERS_PER_MILE = 1609.344
