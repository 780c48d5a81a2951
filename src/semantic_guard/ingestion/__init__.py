"""
Ingestion module initialization.
"""

from .readers import load_values, parse_csv, parse_json

__all__ = ["load_values", "parse_csv", "parse_json"]
