"""
Pipelines module initialization.
"""

from .guard_check import (
    GuardRunResult,
    check_threshold,
    run_guard_check
)

__all__ = [
    "GuardRunResult",
    "check_threshold",
    "run_guard_check",
]
