"""
Analysis module initialization.
"""

from .reporting import build_artifact, export_to_json, generate_run_summary

__all__ = [
    "build_artifact",
    "export_to_json",
    "generate_run_summary",
]
