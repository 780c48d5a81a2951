"""
Statistics module.

Reduces an observation sequence to the fixed summary compared by the
drift detectors.
"""
from .summarizer import StatisticalSummary, summarize

__all__ = ["StatisticalSummary", "summarize"]
