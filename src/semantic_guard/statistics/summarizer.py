"""
Summary statistics for numeric observation sequences.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Sequence

import numpy as np

from ..config import get_logger
from ..config.constants import LOWER_QUARTILE, UPPER_QUARTILE
from ..utils import EmptyInputError

logger = get_logger(__name__)


@dataclass(frozen=True)
class StatisticalSummary:
    """
    Fixed summary of an observation sequence.

    Percentiles are taken at sorted index ``floor(n * q)`` without
    interpolation, so for fewer than four observations the usual
    ``min <= p25 <= median <= p75 <= max`` ordering may not hold.
    """

    mean: float
    median: float
    std_dev: float
    variance: float
    min: float
    max: float
    p25: float
    p75: float
    count: int

    @property
    def range(self) -> float:
        return self.max - self.min

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatisticalSummary":
        """
        Build a summary from its serialized form.

        Args:
            data: Mapping with every summary field (extra keys are ignored)

        Returns:
            StatisticalSummary
        """
        return cls(
            mean=float(data["mean"]),
            median=float(data["median"]),
            std_dev=float(data["std_dev"]),
            variance=float(data["variance"]),
            min=float(data["min"]),
            max=float(data["max"]),
            p25=float(data["p25"]),
            p75=float(data["p75"]),
            count=int(data["count"]),
        )


def _percentile(sorted_values: np.ndarray, q: float) -> float:
    return float(sorted_values[int(np.floor(len(sorted_values) * q))])


def summarize(values: Sequence[float]) -> StatisticalSummary:
    """
    Compute summary statistics for a sequence of observations.
    
    Variance is the population variance (divides by n).
    
    Args:
        values: Numeric observations, in any order
        
    Returns:
        StatisticalSummary
        
    Raises:
        EmptyInputError: If the sequence has no elements
    """
    data = np.asarray(values, dtype=float)
    n = data.size
    
    if n == 0:
        raise EmptyInputError()
    
    ordered = np.sort(data)
    mean = float(np.mean(data))
    
    if n % 2 == 0:
        median = float((ordered[n // 2 - 1] + ordered[n // 2]) / 2)
    else:
        median = float(ordered[n // 2])
    
    variance = float(np.mean((data - mean) ** 2))
    
    summary = StatisticalSummary(
        mean=mean,
        median=median,
        std_dev=float(np.sqrt(variance)),
        variance=variance,
        min=float(ordered[0]),
        max=float(ordered[-1]),
        p25=_percentile(ordered, LOWER_QUARTILE),
        p75=_percentile(ordered, UPPER_QUARTILE),
        count=int(n),
    )
    
    logger.debug("summary_computed", count=summary.count, mean=summary.mean)
    
    return summary
