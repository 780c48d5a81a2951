"""
Data Semantic Guard

Detects silent data corruption in CI by comparing a new data file
against a recorded baseline:
- Magnitude shifts: order-of-magnitude changes in the mean
- Unit conversions: ratios matching known conversion factors
- Distribution shifts: variability and skew changes
- Range anomalies: expanded or contracted value ranges

This component integrates with:
- CI workflows (exit code and action outputs)
- Baseline files committed next to the data
"""

__version__ = "1.0.0"
__author__ = "Data Semantic Guard Team"
