"""
Drift detection module.

Contains detectors for:
- Magnitude Shift: order-of-magnitude changes in the mean
- Unit Conversion: mean ratios matching a known conversion factor
- Distribution Shift: variability and skew changes
- Range Anomaly: expanded or contracted value ranges
"""
from .heuristics import CONVERSION_HEURISTICS, ConversionHeuristic, get_heuristic
from .detectors import (
    DetectorSignal,
    detect_magnitude_shift,
    detect_unit_conversion,
    detect_distribution_shift,
    detect_range_anomaly
)
from .drift import (
    DetectionResult,
    SemanticDriftDetector,
    aggregate_confidence,
    analyze,
    generate_diagnostics
)

__all__ = [
    "CONVERSION_HEURISTICS",
    "ConversionHeuristic",
    "get_heuristic",
    "DetectorSignal",
    "detect_magnitude_shift",
    "detect_unit_conversion",
    "detect_distribution_shift",
    "detect_range_anomaly",
    "DetectionResult",
    "SemanticDriftDetector",
    "aggregate_confidence",
    "analyze",
    "generate_diagnostics"
]
