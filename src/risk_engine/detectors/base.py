"""Abstract base class for all risk factor detectors."""

from __future__ import annotations

from abc import ABC, abstractmethod

from risk_engine.models.assessment import RiskFactor
from risk_engine.models.enums import FactorType
from risk_engine.models.signals import TrainingSignals
from risk_engine.models.thresholds import RiskThresholds


class RiskDetector(ABC):
    """Base class for the detectors run by the RiskEngine.

    Each detector looks at one condition and is a pure function of the
    signals and the threshold table. Detectors are discovered automatically
    by the DetectorRegistry.

    Subclasses must define:
        factor_type: the FactorType this detector reports
        order: position in the fixed detection order (lowest runs first)
        required_data: TrainingSignals field names the detector needs
        detect(): the detection logic
    """

    factor_type: FactorType
    order: int
    required_data: list[str]

    @property
    def detector_id(self) -> str:
        return self.factor_type.value

    def has_required_data(self, signals: TrainingSignals) -> bool:
        """Check that all required TrainingSignals fields are not None."""
        for field_name in self.required_data:
            if getattr(signals, field_name, None) is None:
                return False
        return True

    @abstractmethod
    def detect(
        self, signals: TrainingSignals, thresholds: RiskThresholds
    ) -> RiskFactor | None:
        """Return a RiskFactor if the condition is present, otherwise None.

        Only called when has_required_data() is True.
        """
        ...
