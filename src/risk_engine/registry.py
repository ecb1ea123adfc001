"""Detector registry with auto-discovery of RiskDetector subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from risk_engine.detectors.base import RiskDetector

logger = logging.getLogger(__name__)


class DetectorRegistry:
    """Discovers and manages all RiskDetector implementations.

    Auto-discovers detectors by scanning the detectors/ package tree for
    concrete subclasses of RiskDetector. A new detector is added by placing
    a .py file in the appropriate subdirectory, with no manual registration.
    """

    def __init__(self) -> None:
        self._detectors: dict[str, RiskDetector] = {}

    def discover_detectors(self) -> None:
        """Scan the detectors package tree and register all RiskDetector subclasses."""
        import risk_engine.detectors as detectors_pkg

        self._scan_package(detectors_pkg.__name__, list(detectors_pkg.__path__))

    def _scan_package(self, package_name: str, package_path: list[str]) -> None:
        """Recursively import all modules under a package and register detectors."""
        for _, module_name, _ in pkgutil.walk_packages(
            package_path, prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, RiskDetector)
                    and attr is not RiskDetector
                    and not getattr(attr, "__abstractmethods__", set())
                    and attr.__module__ == module.__name__
                ):
                    self.register(attr())

    def register(self, detector: RiskDetector) -> None:
        """Register a detector instance by its detector_id."""
        if detector.detector_id in self._detectors:
            logger.debug("Replacing detector %s", detector.detector_id)
        self._detectors[detector.detector_id] = detector

    def get(self, detector_id: str) -> RiskDetector | None:
        """Retrieve a detector by its detector_id."""
        return self._detectors.get(detector_id)

    def get_all_detectors(self) -> list[RiskDetector]:
        """Return all registered detectors in detection order."""
        return sorted(self._detectors.values(), key=lambda d: d.order)

    @property
    def detector_ids(self) -> list[str]:
        """List all registered detector IDs in detection order."""
        return [d.detector_id for d in self.get_all_detectors()]
