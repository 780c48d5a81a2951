"""
Known unit-conversion heuristics keyed by comparison type.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class ConversionHeuristic:
    """
    Expected conversion between a baseline unit and a suspect unit.

    Attributes:
        description: Human-readable name used in anomalies and diagnostics
        tolerance: Maximum relative error for a ratio to count as a match
        ratio: Expected current/baseline ratio, if the type has one
        offset: Additive offset of the conversion (informational only)
    """

    description: str
    tolerance: float
    ratio: Optional[float] = None
    offset: Optional[float] = None


CONVERSION_HEURISTICS: Mapping[str, ConversionHeuristic] = MappingProxyType({
    "currency_usd_to_inr": ConversionHeuristic(
        description="USD to INR conversion", ratio=83.0, tolerance=0.15
    ),
    "currency_usd_to_jpy": ConversionHeuristic(
        description="USD to JPY conversion", ratio=150.0, tolerance=0.15
    ),
    # offset is recorded but not used: detectors compare means by ratio only
    "temperature_c_to_f": ConversionHeuristic(
        description="Celsius to Fahrenheit", ratio=1.8, offset=32.0, tolerance=0.1
    ),
    "length_m_to_ft": ConversionHeuristic(
        description="Meters to Feet", ratio=3.28084, tolerance=0.05
    ),
    "custom_numeric_distribution": ConversionHeuristic(
        description="Generic numeric distribution", tolerance=0.2
    ),
})


def get_heuristic(comparison_type: str) -> Optional[ConversionHeuristic]:
    """Heuristic for a comparison type, or None when the type is unknown."""
    return CONVERSION_HEURISTICS.get(comparison_type)
