"""
Configuration settings for the semantic guard.
Values default from environment variables so CI jobs can override them.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Semantic guard settings."""

    # Data Locations
    raw_data_dir: str = os.getenv("GUARD_RAW_DATA_DIR", "data/raw")
    baseline_dir: str = os.getenv("GUARD_BASELINE_DIR", "data/baseline")
    report_dir: str = os.getenv("GUARD_REPORT_DIR", "data/report")
    report_filename: str = os.getenv(
        "GUARD_REPORT_FILENAME", "silent-data-corruption-report.json"
    )

    # Detection Configuration
    confidence_threshold: int = int(os.getenv("GUARD_CONFIDENCE_THRESHOLD", "90"))
    numeric_column: str = os.getenv("GUARD_NUMERIC_COLUMN", "value")
    sample_size: int = int(os.getenv("GUARD_SAMPLE_SIZE", "10"))

    # Prometheus Configuration
    metrics_enabled: bool = os.getenv("GUARD_METRICS_ENABLED", "true").lower() == "true"
    metrics_textfile: Optional[str] = os.getenv("GUARD_METRICS_TEXTFILE", None)

    # Logging Configuration
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "json")

    # GitHub Actions Integration
    github_output: Optional[str] = os.getenv("GITHUB_OUTPUT", None)


# Global settings instance
settings = Settings()
