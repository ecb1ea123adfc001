"""Tests for MileageSpikeDetector — running distance, independent of strength volume."""

from __future__ import annotations

import dataclasses

from risk_engine.detectors.load.mileage_spike import MileageSpikeDetector
from risk_engine.models.enums import FactorType, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class TestMileageSpikeDetector:
    def setup_method(self) -> None:
        self.detector = MileageSpikeDetector()
        self.thresholds = RiskThresholds()

    def _signals(self, current: float, previous: float) -> TrainingSignals:
        return TrainingSignals(current_mileage=current, previous_mileage=previous)

    def test_high_spike(self) -> None:
        factor = self.detector.detect(self._signals(45000, 30000), self.thresholds)
        assert factor is not None
        assert factor.type == FactorType.MILEAGE_SPIKE
        assert factor.severity == Severity.HIGH

    def test_moderate_spike(self) -> None:
        factor = self.detector.detect(self._signals(40000, 30000), self.thresholds)
        assert factor is not None
        assert factor.severity == Severity.MODERATE
        assert "10% rule" in factor.recommendation

    def test_steady_mileage_no_factor(self) -> None:
        assert self.detector.detect(self._signals(31000, 30000), self.thresholds) is None

    def test_no_previous_runs_skipped(self) -> None:
        assert self.detector.detect(self._signals(20000, 0), self.thresholds) is None

    def test_ignores_strength_volume(self) -> None:
        signals = TrainingSignals(current_week_volume=90000.0, previous_week_volume=10000.0)
        assert not self.detector.has_required_data(signals)

    def test_uses_its_own_thresholds(self) -> None:
        thresholds = dataclasses.replace(
            self.thresholds, volume_spike_moderate_pct=5.0, volume_spike_high_pct=10.0
        )
        # Volume thresholds must not leak into mileage detection
        assert self.detector.detect(self._signals(33000, 30000), thresholds) is None
