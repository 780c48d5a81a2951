#!/usr/bin/env python3
"""
Data Semantic Guard CLI
=======================
Compare a data file against its recorded baseline and fail the CI job
when silent data corruption is detected.

Usage:
    semantic-guard --file-type csv --file-name prices.csv \
        --comparison-type currency_usd_to_inr --confidence-threshold 90
"""
import argparse
import sys
from typing import List, Optional

from .config import get_logger
from .config.settings import Settings
from .pipelines import run_guard_check

logger = get_logger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="semantic-guard",
        description="Detect silent data corruption against a recorded baseline"
    )
    parser.add_argument(
        "--file-type",
        type=str,
        required=True,
        help="Data file type (csv or json)",
    )
    parser.add_argument(
        "--file-name",
        type=str,
        required=True,
        help=f"Data file name under {settings.raw_data_dir}",
    )
    parser.add_argument(
        "--comparison-type",
        type=str,
        required=True,
        help="Comparison type, e.g. currency_usd_to_inr or custom_numeric_distribution",
    )
    parser.add_argument(
        "--confidence-threshold",
        type=int,
        default=settings.confidence_threshold,
        help="Confidence score (0-100) at or above which the check fails",
    )
    parser.add_argument(
        "--numeric-column",
        type=str,
        default=settings.numeric_column,
        help="Column (CSV) or key (JSON) holding the numeric values",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    settings = Settings()
    args = build_parser(settings).parse_args(argv)
    
    result = run_guard_check(
        file_name=args.file_name,
        file_type=args.file_type,
        comparison_type=args.comparison_type,
        threshold=args.confidence_threshold,
        numeric_column=args.numeric_column,
        settings=settings
    )
    
    if settings.github_output:
        result.write_action_outputs(settings.github_output)
    
    if result.succeeded:
        logger.info("semantic_guard_passed", status=result.status)
        return 0
    
    if result.error:
        logger.error("semantic_guard_error", error=result.error)
    else:
        logger.error(
            "semantic_guard_failed",
            message=f"Data corruption detected with {round(result.confidence)}% confidence"
        )
    return 1


if __name__ == "__main__":
    sys.exit(main())
