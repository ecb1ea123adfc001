"""Risk factor detectors, discovered by DetectorRegistry."""
