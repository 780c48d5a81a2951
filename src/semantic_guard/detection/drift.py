"""
Semantic drift analysis.

Runs the four heuristic sub-detectors against a baseline and a current
summary, aggregates their confidence signals into one bounded score and
renders a diagnostic report from the result.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from ..config import get_logger
from ..config.constants import (
    MULTI_SIGNAL_BOOST,
    MULTI_SIGNAL_BOOST_CAP,
    MAX_CONFIDENCE,
    CONFIDENCE_HIGH,
    CONFIDENCE_MEDIUM,
    CONFIDENCE_LOW
)
from ..statistics import StatisticalSummary
from .detectors import (
    DetectorSignal,
    detect_magnitude_shift,
    detect_unit_conversion,
    detect_distribution_shift,
    detect_range_anomaly
)
from .heuristics import get_heuristic

logger = get_logger(__name__)

COMMON_CAUSES = (
    "Unit conversion (currency, temperature, length)",
    "Locale/region change in data source",
    "Schema migration without data transformation",
    "Upstream API changes",
    "Data aggregation level changes",
)


@dataclass(frozen=True)
class DetectionResult:
    """
    Outcome of one baseline/current comparison.

    Attributes:
        comparison_type: Comparison type the analysis ran with
        confidence: Aggregated confidence score in [0, 100]
        anomalies: Anomaly descriptions in detection order
        signals: Every sub-detector's signal, fired or not
    """

    comparison_type: str
    confidence: float = 0
    anomalies: Tuple[str, ...] = ()
    signals: Tuple[DetectorSignal, ...] = field(default=(), compare=False)

    @property
    def detected(self) -> bool:
        return len(self.anomalies) > 0

    @property
    def fired_detectors(self) -> List[str]:
        return [signal.detector for signal in self.signals if signal.detected]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comparison_type": self.comparison_type,
            "confidence": self.confidence,
            "anomalies": list(self.anomalies),
            "detected": self.detected,
            "fired_detectors": self.fired_detectors,
        }


def aggregate_confidence(scores: Sequence[float]) -> float:
    """
    Combine the confidence of every firing detector into one score.
    
    A single signal passes through unchanged. Multiple signals take the
    strongest one plus a boost per extra signal, capped at 100.
    
    Args:
        scores: Confidence of each detector that fired
        
    Returns:
        Aggregated confidence in [0, 100]
    """
    if not scores:
        return 0
    if len(scores) == 1:
        return scores[0]
    
    boost = min((len(scores) - 1) * MULTI_SIGNAL_BOOST, MULTI_SIGNAL_BOOST_CAP)
    return min(max(scores) + boost, MAX_CONFIDENCE)


def analyze(
    baseline: StatisticalSummary,
    current: StatisticalSummary,
    comparison_type: str
) -> DetectionResult:
    """
    Compare a current summary against its baseline.
    
    Args:
        baseline: Baseline summary
        current: Current summary
        comparison_type: Key selecting the unit-conversion heuristic
        
    Returns:
        DetectionResult
    """
    signals = (
        detect_magnitude_shift(baseline, current),
        detect_unit_conversion(baseline, current, comparison_type),
        detect_distribution_shift(baseline, current),
        detect_range_anomaly(baseline, current),
    )
    
    fired = [signal for signal in signals if signal.detected]
    result = DetectionResult(
        comparison_type=comparison_type,
        confidence=aggregate_confidence([signal.confidence for signal in fired]),
        anomalies=tuple(signal.anomaly for signal in fired if signal.anomaly),
        signals=signals,
    )
    
    logger.info(
        "semantic_drift_analysis_completed",
        comparison_type=comparison_type,
        confidence=result.confidence,
        anomalies=len(result.anomalies),
        fired_detectors=result.fired_detectors
    )
    
    return result


def generate_diagnostics(result: DetectionResult) -> str:
    """
    Render a human-readable report for a detection result.
    
    Args:
        result: Result returned by analyze()
        
    Returns:
        Multi-line diagnostic report
    """
    lines = []
    
    if result.confidence >= CONFIDENCE_HIGH:
        lines.append("🚨 HIGH CONFIDENCE: Silent data corruption detected")
    elif result.confidence >= CONFIDENCE_MEDIUM:
        lines.append("⚠️  MEDIUM CONFIDENCE: Suspicious data patterns detected")
    elif result.confidence >= CONFIDENCE_LOW:
        lines.append("ℹ️  LOW CONFIDENCE: Minor anomalies detected")
    else:
        lines.append("✅ No significant semantic drift detected")
    
    heuristic = get_heuristic(result.comparison_type)
    if heuristic is not None:
        lines.append(f"\nAnalysis type: {heuristic.description}")
    
    if result.anomalies:
        lines.append("\nDetected anomalies:")
        for idx, anomaly in enumerate(result.anomalies, start=1):
            lines.append(f"  {idx}. {anomaly}")
        
        lines.append("\nCommon causes:")
        for cause in COMMON_CAUSES:
            lines.append(f"  - {cause}")
    
    return "\n".join(lines)


class SemanticDriftDetector:
    """
    Drift analysis bound to one comparison type.

    Holds no per-call state, so one instance can serve any number of
    comparisons, including concurrent ones.
    """
    
    def __init__(self, comparison_type: str):
        """
        Initialize detector.
        
        Args:
            comparison_type: Key selecting the unit-conversion heuristic
        """
        self.comparison_type = comparison_type
        self.heuristic = get_heuristic(comparison_type)
        
        if self.heuristic is None:
            logger.info("unknown_comparison_type", comparison_type=comparison_type)
    
    def analyze(
        self,
        baseline: StatisticalSummary,
        current: StatisticalSummary
    ) -> DetectionResult:
        return analyze(baseline, current, self.comparison_type)
    
    def generate_diagnostics(self, result: DetectionResult) -> str:
        return generate_diagnostics(result)
