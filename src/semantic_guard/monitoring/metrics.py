"""
Prometheus metrics for semantic guard runs.

CI jobs are short-lived, so metrics live on a dedicated registry that is
written to a node-exporter textfile at the end of a run instead of being
served over HTTP.
"""

from pathlib import Path
from typing import Optional, Union

import structlog
from prometheus_client import CollectorRegistry, Gauge, write_to_textfile

from ..config.constants import (
    METRIC_CONFIDENCE_SCORE,
    METRIC_ANOMALIES_DETECTED,
    METRIC_DETECTOR_FIRED,
    METRIC_RUN_STATUS,
    RUN_STATUS_PASSED,
    RUN_STATUS_FAILED,
    RUN_STATUS_BASELINE_CREATED,
    RUN_STATUS_ERROR
)
from ..detection import DetectionResult

logger = structlog.get_logger(__name__)

RUN_STATUSES = (
    RUN_STATUS_PASSED,
    RUN_STATUS_FAILED,
    RUN_STATUS_BASELINE_CREATED,
    RUN_STATUS_ERROR
)


class GuardMetrics:
    """
    Gauges describing the outcome of one guard run.
    """
    
    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """
        Initialize metrics.
        
        Args:
            registry: Registry to register gauges on (a fresh one by default)
        """
        self.registry = registry or CollectorRegistry()
        
        self.confidence_score = Gauge(
            METRIC_CONFIDENCE_SCORE,
            "Aggregated semantic drift confidence score (0-100)",
            ["file_name", "comparison_type"],
            registry=self.registry,
        )
        self.anomalies_detected = Gauge(
            METRIC_ANOMALIES_DETECTED,
            "Number of anomalies detected in the last run",
            ["file_name"],
            registry=self.registry,
        )
        self.detector_fired = Gauge(
            METRIC_DETECTOR_FIRED,
            "Whether a sub-detector fired (1=fired, 0=abstained or passed)",
            ["file_name", "detector"],
            registry=self.registry,
        )
        self.run_status = Gauge(
            METRIC_RUN_STATUS,
            "Status of the last run (1 for the active status)",
            ["file_name", "status"],
            registry=self.registry,
        )
    
    def record_result(self, file_name: str, result: DetectionResult) -> None:
        """
        Record a detection result.
        
        Args:
            file_name: Name of the analysed file
            result: Detection result
        """
        self.confidence_score.labels(
            file_name=file_name, comparison_type=result.comparison_type
        ).set(result.confidence)
        self.anomalies_detected.labels(file_name=file_name).set(len(result.anomalies))
        
        for signal in result.signals:
            self.detector_fired.labels(
                file_name=file_name, detector=signal.detector
            ).set(1 if signal.detected else 0)
        
        logger.debug("result_metrics_recorded", file_name=file_name)
    
    def record_status(self, file_name: str, status: str) -> None:
        for known in RUN_STATUSES:
            self.run_status.labels(file_name=file_name, status=known).set(
                1 if known == status else 0
            )
    
    def write_textfile(self, path: Union[str, Path]) -> None:
        """
        Write the registry in Prometheus text format.
        
        Args:
            path: Target file, usually in a textfile collector directory
        """
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        write_to_textfile(str(path), self.registry)
        logger.info("metrics_textfile_written", path=str(path))
