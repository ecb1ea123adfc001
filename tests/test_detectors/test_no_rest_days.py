"""Tests for NoRestDaysDetector."""

from __future__ import annotations

from risk_engine.detectors.schedule.no_rest_days import NoRestDaysDetector
from risk_engine.models.enums import FactorType, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class TestNoRestDaysDetector:
    def setup_method(self) -> None:
        self.detector = NoRestDaysDetector()
        self.thresholds = RiskThresholds()

    def _detect(self, days: int):
        return self.detector.detect(
            TrainingSignals(consecutive_training_days=days), self.thresholds
        )

    def test_short_streak_no_factor(self) -> None:
        assert self._detect(0) is None
        assert self._detect(5) is None

    def test_six_days_moderate(self) -> None:
        factor = self._detect(6)
        assert factor is not None
        assert factor.type == FactorType.NO_REST_DAYS
        assert factor.severity == Severity.MODERATE
        assert factor.value == 6

    def test_eight_days_high(self) -> None:
        assert self._detect(8).severity == Severity.HIGH
        assert self._detect(12).severity == Severity.HIGH

    def test_recommends_rest_day(self) -> None:
        assert "rest day" in self._detect(7).recommendation.lower()

    def test_missing_streak_not_applicable(self) -> None:
        assert not self.detector.has_required_data(TrainingSignals())
