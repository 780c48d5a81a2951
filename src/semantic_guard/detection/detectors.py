"""
Heuristic sub-detectors for semantic drift.

Each detector compares a baseline summary with a current summary and
returns a DetectorSignal. Guard conditions (zero means, zero ranges,
non-finite coefficients of variation) make a detector abstain instead
of raising, so one degenerate baseline never blocks the comparison.
"""
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..config import get_logger
from ..config.constants import (
    MAGNITUDE_LOG_THRESHOLD,
    SEVERE_DROP_RATIO,
    SEVERE_INCREASE_RATIO,
    SIGNIFICANT_SHIFT_LOW_RATIO,
    SIGNIFICANT_SHIFT_HIGH_RATIO,
    CONFIDENCE_SEVERE_MAGNITUDE,
    CONFIDENCE_SIGNIFICANT_MAGNITUDE,
    CONFIDENCE_UNIT_CONVERSION,
    CV_RATIO_LOW,
    CV_RATIO_HIGH,
    MEDIAN_MEAN_SHIFT_THRESHOLD,
    CONFIDENCE_VARIABILITY_SHIFT,
    CONFIDENCE_SKEW_SHIFT,
    RANGE_EXPANSION_RATIO,
    RANGE_CONTRACTION_RATIO,
    CONFIDENCE_RANGE_ANOMALY
)
from ..statistics import StatisticalSummary
from ..utils.helpers import calculate_percentage_change, float_divide, to_fixed
from .heuristics import get_heuristic

logger = get_logger(__name__)

MAGNITUDE_SHIFT = "magnitude_shift"
UNIT_CONVERSION = "unit_conversion"
DISTRIBUTION_SHIFT = "distribution_shift"
RANGE_ANOMALY = "range_anomaly"

DETECTOR_NAMES = (MAGNITUDE_SHIFT, UNIT_CONVERSION, DISTRIBUTION_SHIFT, RANGE_ANOMALY)


@dataclass(frozen=True)
class DetectorSignal:
    """Outcome of a single sub-detector."""

    detector: str
    detected: bool = False
    confidence: float = 0
    anomaly: Optional[str] = None


def _fired(detector: str, confidence: float, anomaly: str) -> DetectorSignal:
    logger.debug("detector_fired", detector=detector, confidence=confidence, anomaly=anomaly)
    return DetectorSignal(detector=detector, detected=True, confidence=confidence, anomaly=anomaly)


def detect_magnitude_shift(
    baseline: StatisticalSummary,
    current: StatisticalSummary
) -> DetectorSignal:
    """
    Detect order-of-magnitude changes in the mean.
    
    Fires when the means differ by more than half an order of magnitude,
    tiered by the raw ratio.
    
    Args:
        baseline: Baseline summary
        current: Current summary
        
    Returns:
        DetectorSignal
    """
    if baseline.mean == 0:
        return DetectorSignal(MAGNITUDE_SHIFT)
    
    ratio = current.mean / baseline.mean
    with np.errstate(divide="ignore"):
        log_ratio = float(np.log10(abs(ratio)))
    
    if abs(log_ratio) > MAGNITUDE_LOG_THRESHOLD:
        percent_change = calculate_percentage_change(baseline.mean, current.mean)
        
        if ratio < SEVERE_DROP_RATIO:
            return _fired(
                MAGNITUDE_SHIFT,
                CONFIDENCE_SEVERE_MAGNITUDE,
                f"Severe magnitude drop: {to_fixed(percent_change, 2)}% decrease (ratio: {to_fixed(ratio, 4)})"
            )
        elif ratio > SEVERE_INCREASE_RATIO:
            return _fired(
                MAGNITUDE_SHIFT,
                CONFIDENCE_SEVERE_MAGNITUDE,
                f"Severe magnitude increase: {to_fixed(percent_change, 2)}% increase (ratio: {to_fixed(ratio, 4)})"
            )
        elif ratio < SIGNIFICANT_SHIFT_LOW_RATIO or ratio > SIGNIFICANT_SHIFT_HIGH_RATIO:
            return _fired(
                MAGNITUDE_SHIFT,
                CONFIDENCE_SIGNIFICANT_MAGNITUDE,
                f"Significant magnitude shift: {to_fixed(percent_change, 2)}% change"
            )
    
    return DetectorSignal(MAGNITUDE_SHIFT)


def detect_unit_conversion(
    baseline: StatisticalSummary,
    current: StatisticalSummary,
    comparison_type: str
) -> DetectorSignal:
    """
    Detect a mean ratio matching the comparison type's conversion factor.
    
    Checks the forward ratio first, then its inverse; at most one fires.
    
    Args:
        baseline: Baseline summary
        current: Current summary
        comparison_type: Key into the conversion heuristics
        
    Returns:
        DetectorSignal
    """
    heuristic = get_heuristic(comparison_type)
    if heuristic is None or not heuristic.ratio:
        return DetectorSignal(UNIT_CONVERSION)
    
    if baseline.mean == 0:
        return DetectorSignal(UNIT_CONVERSION)
    
    ratio = current.mean / baseline.mean
    expected_ratio = heuristic.ratio
    
    ratio_error = abs(ratio - expected_ratio) / expected_ratio
    if ratio_error < heuristic.tolerance:
        return _fired(
            UNIT_CONVERSION,
            CONFIDENCE_UNIT_CONVERSION,
            f"Possible {heuristic.description}: ratio {to_fixed(ratio, 2)} "
            f"matches expected {to_fixed(expected_ratio, 2)}"
        )
    
    inverse_ratio = float_divide(1, ratio)
    inverse_error = abs(inverse_ratio - expected_ratio) / expected_ratio
    if inverse_error < heuristic.tolerance:
        return _fired(
            UNIT_CONVERSION,
            CONFIDENCE_UNIT_CONVERSION,
            f"Possible inverse {heuristic.description}: ratio {to_fixed(inverse_ratio, 2)} "
            f"matches expected {to_fixed(expected_ratio, 2)}"
        )
    
    return DetectorSignal(UNIT_CONVERSION)


def detect_distribution_shift(
    baseline: StatisticalSummary,
    current: StatisticalSummary
) -> DetectorSignal:
    """
    Detect changes in variability or skew.
    
    The coefficient of variation check runs first and wins; the
    median/mean skew check only runs when variability is stable.
    
    Args:
        baseline: Baseline summary
        current: Current summary
        
    Returns:
        DetectorSignal
    """
    baseline_cv = float_divide(baseline.std_dev, baseline.mean)
    current_cv = float_divide(current.std_dev, current.mean)
    
    if not math.isfinite(baseline_cv) or not math.isfinite(current_cv):
        return DetectorSignal(DISTRIBUTION_SHIFT)
    
    cv_ratio = float_divide(current_cv, baseline_cv)
    
    if cv_ratio > CV_RATIO_HIGH or cv_ratio < CV_RATIO_LOW:
        change = "increase" if cv_ratio > 1 else "decrease"
        return _fired(
            DISTRIBUTION_SHIFT,
            CONFIDENCE_VARIABILITY_SHIFT,
            f"Distribution variability {change}: coefficient of variation "
            f"changed by {to_fixed(abs(cv_ratio - 1) * 100, 1)}%"
        )
    
    baseline_skew = float_divide(baseline.median, baseline.mean)
    current_skew = float_divide(current.median, current.mean)
    median_mean_shift = abs(current_skew - baseline_skew)
    
    if median_mean_shift > MEDIAN_MEAN_SHIFT_THRESHOLD:
        return _fired(
            DISTRIBUTION_SHIFT,
            CONFIDENCE_SKEW_SHIFT,
            f"Distribution skew changed: median/mean ratio shifted by "
            f"{to_fixed(median_mean_shift * 100, 1)}%"
        )
    
    return DetectorSignal(DISTRIBUTION_SHIFT)


def detect_range_anomaly(
    baseline: StatisticalSummary,
    current: StatisticalSummary
) -> DetectorSignal:
    """Detect a value range that expanded or contracted sharply."""
    baseline_range = baseline.range
    if baseline_range == 0:
        return DetectorSignal(RANGE_ANOMALY)
    
    range_ratio = current.range / baseline_range
    
    if range_ratio > RANGE_EXPANSION_RATIO:
        return _fired(
            RANGE_ANOMALY,
            CONFIDENCE_RANGE_ANOMALY,
            f"Data range expanded significantly: {to_fixed(range_ratio, 1)}x larger than baseline"
        )
    elif range_ratio < RANGE_CONTRACTION_RATIO:
        return _fired(
            RANGE_ANOMALY,
            CONFIDENCE_RANGE_ANOMALY,
            f"Data range contracted significantly: {to_fixed(range_ratio * 100, 0)}% of baseline range"
        )
    
    return DetectorSignal(RANGE_ANOMALY)
