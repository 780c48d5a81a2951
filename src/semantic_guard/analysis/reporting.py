"""
Reporting module for the semantic guard.

This module assembles the artifact report uploaded by the CI job and
the console summary of a run.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..config import get_logger
from ..config.constants import (
    ARTIFACT_STATUS_FAILED,
    ARTIFACT_STATUS_PASSED,
    GUARD_COMPONENT_VERSION
)
from ..detection import DetectionResult
from ..statistics import StatisticalSummary
from ..utils import ReportExportException
from ..utils.helpers import head, utc_timestamp

logger = get_logger(__name__)


def build_artifact(
    result: DetectionResult,
    diagnostics: str,
    baseline_stats: StatisticalSummary,
    current_stats: StatisticalSummary,
    current_values: Sequence[float],
    file_type: str,
    threshold: float,
    sample_before: Optional[List[float]] = None,
    sample_size: int = 10
) -> Dict[str, Any]:
    """
    Assemble the artifact report for a comparison.
    
    Args:
        result: Detection result
        diagnostics: Diagnostic report for the result
        baseline_stats: Baseline summary
        current_stats: Current summary
        current_values: Current raw values
        file_type: Type of the analysed file
        threshold: Confidence threshold that fails the run
        sample_before: Sample values stored with the baseline
        sample_size: Number of current values kept as a sample
        
    Returns:
        Artifact as a JSON-serialisable dictionary
    """
    confidence = result.confidence
    
    return {
        "metadata": {
            "timestamp": utc_timestamp(),
            "file_type": file_type,
            "comparison_type": result.comparison_type,
            "confidence_score": round(confidence),
            "threshold": threshold,
            "version": GUARD_COMPONENT_VERSION
        },
        "baseline_stats": baseline_stats.to_dict(),
        "current_stats": current_stats.to_dict(),
        "detected_anomalies": list(result.anomalies),
        "fired_detectors": result.fired_detectors,
        "diagnostics": diagnostics,
        "sample_before": list(sample_before or []),
        "sample_after": head(current_values, sample_size),
        "status": ARTIFACT_STATUS_FAILED if confidence >= threshold else ARTIFACT_STATUS_PASSED
    }


def export_to_json(artifact: Dict[str, Any], output_path: Union[str, Path]) -> Path:
    """
    Write an artifact report to a JSON file.
    
    Args:
        artifact: Artifact dictionary
        output_path: Path to save JSON file
        
    Returns:
        Path of the written file
    """
    logger.info("exporting_artifact_to_json", output_path=str(output_path))
    
    output_path_obj = Path(output_path)
    
    try:
        output_path_obj.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path_obj, "w", encoding="utf-8") as f:
            json.dump(artifact, f, indent=2, default=str)
    except OSError as e:
        raise ReportExportException(
            f"Failed to write artifact: {e}",
            details={"path": str(output_path_obj)}
        )
    
    logger.info(
        "artifact_exported",
        path=str(output_path_obj),
        size_bytes=output_path_obj.stat().st_size
    )
    
    return output_path_obj


def generate_run_summary(
    file_path: str,
    file_type: str,
    comparison_type: str,
    threshold: float,
    current_stats: StatisticalSummary
) -> str:
    """
    Console banner describing what a run is about to check.
    
    Args:
        file_path: Path of the analysed file
        file_type: Type of the analysed file
        comparison_type: Comparison type in use
        threshold: Confidence threshold that fails the run
        current_stats: Summary of the current data
        
    Returns:
        Formatted summary as string
    """
    lines = []
    lines.append("=" * 60)
    lines.append("🛡️  Data Semantic Guard - Silent Corruption Detector")
    lines.append("=" * 60)
    lines.append(f"File: {file_path}")
    lines.append(f"Type: {file_type}")
    lines.append(f"Comparison: {comparison_type}")
    lines.append(f"Threshold: {threshold}%")
    lines.append("")
    lines.append("📈 Current Data Statistics:")
    lines.append(f"  Count: {current_stats.count}")
    lines.append(f"  Mean: {current_stats.mean:.2f}")
    lines.append(f"  Median: {current_stats.median:.2f}")
    lines.append(f"  Std Dev: {current_stats.std_dev:.2f}")
    lines.append(f"  Range: [{current_stats.min:.2f}, {current_stats.max:.2f}]")
    
    return "\n".join(lines)
