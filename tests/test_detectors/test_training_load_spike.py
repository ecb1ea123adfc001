"""Tests for TrainingLoadSpikeDetector — week-over-week strength volume."""

from __future__ import annotations

import dataclasses

import pytest

from risk_engine.detectors.load.training_load_spike import TrainingLoadSpikeDetector
from risk_engine.models.enums import FactorType, Severity
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class TestTrainingLoadSpikeDetector:
    def setup_method(self) -> None:
        self.detector = TrainingLoadSpikeDetector()
        self.thresholds = RiskThresholds()

    def _detect(self, current: float, previous: float):
        signals = TrainingSignals(current_week_volume=current, previous_week_volume=previous)
        return self.detector.detect(signals, self.thresholds)

    def test_small_increase_no_factor(self) -> None:
        # 48000 vs 45000 ≈ 6.7%
        assert self._detect(48000, 45000) is None

    def test_large_increase_is_high(self) -> None:
        # 70000 vs 45000 ≈ 55.6%
        factor = self._detect(70000, 45000)
        assert factor is not None
        assert factor.type == FactorType.TRAINING_LOAD_SPIKE
        assert factor.severity == Severity.HIGH
        assert factor.value == pytest.approx(55.6, abs=0.1)
        assert "56%" in factor.description

    def test_moderate_band(self) -> None:
        factor = self._detect(13500, 10000)  # 35%
        assert factor is not None
        assert factor.severity == Severity.MODERATE

    def test_exact_boundaries(self) -> None:
        assert self._detect(13000, 10000).severity == Severity.MODERATE  # 30%
        assert self._detect(15000, 10000).severity == Severity.HIGH  # 50%
        assert self._detect(12999, 10000) is None

    def test_decrease_no_factor(self) -> None:
        assert self._detect(20000, 45000) is None

    def test_zero_previous_week_skipped(self) -> None:
        assert self._detect(50000, 0) is None

    def test_recommendation_caps_growth(self) -> None:
        factor = self._detect(70000, 45000)
        assert "10%" in factor.recommendation

    def test_missing_volume_not_applicable(self) -> None:
        assert not self.detector.has_required_data(TrainingSignals(current_week_volume=5000.0))
        assert not self.detector.has_required_data(TrainingSignals())

    def test_threshold_override(self) -> None:
        self.thresholds = dataclasses.replace(self.thresholds, volume_spike_moderate_pct=5.0)
        factor = self._detect(48000, 45000)
        assert factor is not None
        assert factor.severity == Severity.MODERATE
