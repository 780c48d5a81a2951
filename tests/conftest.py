"""
Test configuration and fixtures for semantic guard tests.

This module provides pytest fixtures and configuration for all test modules.
"""

import json
from pathlib import Path
from typing import Any, Callable, List

import pytest

from semantic_guard.config.settings import Settings
from semantic_guard.statistics import StatisticalSummary


@pytest.fixture
def test_settings(tmp_path):
    """Create test settings rooted in a temporary directory."""
    return Settings(
        raw_data_dir=str(tmp_path / "data" / "raw"),
        baseline_dir=str(tmp_path / "data" / "baseline"),
        report_dir=str(tmp_path / "data" / "report"),
        confidence_threshold=90,
        numeric_column="value",
        sample_size=10,
        metrics_enabled=False,
        metrics_textfile=None,
        log_level="DEBUG",
        github_output=None,
    )


@pytest.fixture
def make_summary() -> Callable[..., StatisticalSummary]:
    """Factory for summaries; unspecified fields are derived from the mean."""

    def _make(
        mean: float = 100.0,
        std_dev: float = 10.0,
        median: float = None,
        min: float = None,
        max: float = None,
        count: int = 100,
    ) -> StatisticalSummary:
        median = mean if median is None else median
        min = mean - 2 * std_dev if min is None else min
        max = mean + 2 * std_dev if max is None else max
        return StatisticalSummary(
            mean=mean,
            median=median,
            std_dev=std_dev,
            variance=std_dev ** 2,
            min=min,
            max=max,
            p25=median - std_dev,
            p75=median + std_dev,
            count=count,
        )

    return _make


@pytest.fixture
def baseline_values() -> List[float]:
    """Prices recorded in USD."""
    return [10.0, 12.0, 11.0, 13.0, 9.0, 10.0, 12.0, 11.0, 14.0, 8.0, 10.5, 11.5]


@pytest.fixture
def write_csv(tmp_path) -> Callable[..., Path]:
    """Write values to a single-column CSV file and return its path."""

    def _write(path: Path, values: List[Any], column: str = "value") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = [f"id,{column}"] + [f"{i},{v}" for i, v in enumerate(values)]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_json(tmp_path) -> Callable[..., Path]:
    """Write any JSON document and return its path."""

    def _write(path: Path, document: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
