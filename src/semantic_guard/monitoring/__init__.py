"""
Monitoring module initialization.
"""

from .metrics import GuardMetrics

__all__ = ["GuardMetrics"]
