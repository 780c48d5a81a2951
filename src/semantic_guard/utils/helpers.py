"""
Helper utilities for the semantic guard.
"""

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, List, Sequence

import numpy as np


def utc_timestamp() -> str:
    """
    Current UTC time as an ISO string.
    
    Returns:
        Formatted string
    """
    return datetime.now(timezone.utc).isoformat()


def calculate_percentage_change(old_value: float, new_value: float) -> float:
    """
    Calculate signed percentage change between two values.
    
    Args:
        old_value: Old value (must be non-zero)
        new_value: New value
        
    Returns:
        Percentage change
    """
    return (new_value - old_value) / old_value * 100


def float_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE semantics: x/0 is +/-inf and 0/0 is nan.
    
    Args:
        numerator: Numerator
        denominator: Denominator
        
    Returns:
        Result of division
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def head(values: Sequence[Any], size: int) -> List[Any]:
    """First ``size`` items of a sequence as a plain list."""
    return [v.item() if isinstance(v, np.generic) else v for v in list(values)[:size]]


def to_fixed(value: float, digits: int) -> str:
    """
    Format a number with a fixed number of decimals, rounding ties away
    from zero on the exact binary value (the way report consumers written
    against JavaScript's ``toFixed`` expect).
    
    Args:
        value: Number to format
        digits: Decimal places
        
    Returns:
        Formatted string; "Infinity", "-Infinity" or "NaN" when not finite
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    
    exponent = Decimal(1).scaleb(-digits)
    # -0.0 formats without a sign
    return str(Decimal(value + 0.0).quantize(exponent, rounding=ROUND_HALF_UP))
