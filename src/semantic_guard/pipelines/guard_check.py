"""
Guard check pipeline.

This pipeline runs once per CI job to:
1. Parse the numeric column of the data file
2. Summarize the current data
3. Load the baseline, or bootstrap it on first run
4. Analyze semantic drift against the baseline
5. Write the artifact report and metrics
6. Decide pass/fail against the confidence threshold
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..analysis.reporting import build_artifact, export_to_json, generate_run_summary
from ..config import get_logger
from ..config.constants import (
    RUN_STATUS_PASSED,
    RUN_STATUS_FAILED,
    RUN_STATUS_BASELINE_CREATED,
    RUN_STATUS_ERROR
)
from ..config.settings import Settings
from ..detection import DetectionResult, SemanticDriftDetector
from ..ingestion import load_values
from ..monitoring import GuardMetrics
from ..statistics import summarize
from ..storage import BaselineStore
from ..utils import SemanticGuardException

logger = get_logger(__name__)


@dataclass
class GuardRunResult:
    """Outcome of a guard run."""

    status: str
    confidence: float = 0
    anomalies: List[str] = field(default_factory=list)
    artifact_path: Optional[str] = None
    baseline_created: bool = False
    diagnostics: Optional[str] = None
    detection: Optional[DetectionResult] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status in (RUN_STATUS_PASSED, RUN_STATUS_BASELINE_CREATED)

    def outputs(self) -> Dict[str, Any]:
        """Values exposed as CI step outputs."""
        outputs = {
            "confidence_score": round(self.confidence),
            "detected_anomalies": len(self.anomalies),
            "artifact_path": self.artifact_path or "",
        }
        if self.baseline_created:
            outputs["baseline_created"] = "true"
        return outputs

    def write_action_outputs(self, path: Union[str, Path]) -> None:
        """
        Append step outputs to a GitHub Actions output file.
        
        Args:
            path: Value of $GITHUB_OUTPUT
        """
        with open(path, "a", encoding="utf-8") as f:
            for key, value in self.outputs().items():
                f.write(f"{key}={value}\n")
        
        logger.debug("action_outputs_written", path=str(path))


def check_threshold(confidence: float, threshold: float) -> bool:
    """
    Check if the confidence score reaches the failure threshold.
    
    Args:
        confidence: Aggregated confidence score
        threshold: Confidence threshold
        
    Returns:
        True if the run must fail, False otherwise
    """
    exceeded = confidence >= threshold
    
    logger.info(
        "threshold_check_complete",
        confidence=confidence,
        threshold=threshold,
        exceeded=exceeded
    )
    
    return exceeded


def run_guard_check(
    file_name: str,
    file_type: str,
    comparison_type: str,
    threshold: Optional[float] = None,
    numeric_column: Optional[str] = None,
    settings: Optional[Settings] = None,
    metrics: Optional[GuardMetrics] = None
) -> GuardRunResult:
    """
    Main entry point for the guard check pipeline.
    
    Args:
        file_name: Data file name under the raw data directory
        file_type: "csv" or "json"
        comparison_type: Key selecting the unit-conversion heuristic
        threshold: Confidence that fails the run (default from settings)
        numeric_column: Column holding the values (default from settings)
        settings: Configuration settings
        metrics: Metrics to record into (created when metrics are enabled)
        
    Returns:
        GuardRunResult
    """
    settings = settings or Settings()
    threshold = threshold if threshold is not None else settings.confidence_threshold
    numeric_column = numeric_column or settings.numeric_column
    if metrics is None and settings.metrics_enabled:
        metrics = GuardMetrics()
    
    file_path = Path(settings.raw_data_dir) / file_name
    
    logger.info(
        "starting_guard_check_pipeline",
        file=str(file_path),
        file_type=file_type,
        comparison_type=comparison_type,
        threshold=threshold
    )
    
    try:
        # 1. Parse data file
        values = load_values(file_path, file_type, numeric_column)
        logger.info("data_file_parsed", values=len(values))
        
        # 2. Summarize current data
        current_stats = summarize(values)
        logger.info(
            generate_run_summary(
                str(file_path), file_type, comparison_type, threshold, current_stats
            )
        )
        
        # 3. Load or bootstrap baseline
        store = BaselineStore(settings.baseline_dir, settings.sample_size)
        baseline = store.load_or_create(file_name, current_stats, values)
        
        if baseline.is_new:
            logger.info(
                "first_run_baseline_created",
                baseline_path=str(baseline.path),
                hint=f"Commit the baseline file: git add {settings.baseline_dir} && git commit"
            )
            result = GuardRunResult(
                status=RUN_STATUS_BASELINE_CREATED,
                artifact_path=str(baseline.path),
                baseline_created=True
            )
            _finish(result, file_name, settings, metrics)
            return result
        
        # 4. Analyze semantic drift
        detector = SemanticDriftDetector(comparison_type)
        detection = detector.analyze(baseline.stats, current_stats)
        diagnostics = detector.generate_diagnostics(detection)
        
        logger.info("confidence_score", confidence=round(detection.confidence))
        if detection.detected:
            logger.info(diagnostics)
        else:
            logger.info("no_semantic_drift_detected")
        
        # 5. Write artifact report
        artifact = build_artifact(
            detection,
            diagnostics,
            baseline.stats,
            current_stats,
            values,
            file_type=file_type,
            threshold=threshold,
            sample_before=baseline.sample_data,
            sample_size=settings.sample_size
        )
        artifact_path = export_to_json(
            artifact, Path(settings.report_dir) / settings.report_filename
        )
        
        if metrics is not None:
            metrics.record_result(file_name, detection)
        
        # 6. Decide pass/fail
        failed = check_threshold(detection.confidence, threshold)
        if failed:
            logger.error(
                "silent_data_corruption_detected",
                confidence=round(detection.confidence),
                threshold=threshold
            )
        
        result = GuardRunResult(
            status=RUN_STATUS_FAILED if failed else RUN_STATUS_PASSED,
            confidence=detection.confidence,
            anomalies=list(detection.anomalies),
            artifact_path=str(artifact_path),
            diagnostics=diagnostics,
            detection=detection
        )
    
    except SemanticGuardException as e:
        logger.error(
            "guard_check_pipeline_failed",
            error=e.message,
            error_code=e.error_code,
            details=e.details
        )
        result = GuardRunResult(status=RUN_STATUS_ERROR, error=e.message)
    
    _finish(result, file_name, settings, metrics)
    return result


def _finish(
    result: GuardRunResult,
    file_name: str,
    settings: Settings,
    metrics: Optional[GuardMetrics]
) -> None:
    if metrics is not None:
        metrics.record_status(file_name, result.status)
        if settings.metrics_textfile:
            metrics.write_textfile(settings.metrics_textfile)
    
    logger.info("guard_check_pipeline_complete", status=result.status)
