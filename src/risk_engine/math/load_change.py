"""Week-over-week load change calculations.

Reference:
    Gabbett (2016). The training-injury prevention paradox: should athletes
    be training smarter and harder? Br J Sports Med 50(5):273-280.
"""

from __future__ import annotations

from risk_engine.models.enums import Severity


def percent_change(current: float, previous: float) -> float | None:
    """Percent change from *previous* to *current*.

    Returns None when *previous* is not positive: with no baseline week
    there is nothing to compare against.

    Examples:
        percent_change(70000, 45000) → 55.55...
        percent_change(100, 0) → None
    """
    if previous <= 0:
        return None
    return (current - previous) / previous * 100.0


def classify_spike(
    change_pct: float | None, moderate_pct: float, high_pct: float
) -> Severity | None:
    """Classify a percent increase as HIGH, MODERATE, or None (no spike)."""
    if change_pct is None:
        return None
    if change_pct >= high_pct:
        return Severity.HIGH
    if change_pct >= moderate_pct:
        return Severity.MODERATE
    return None
