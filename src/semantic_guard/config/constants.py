"""
Constants for drift detection thresholds and confidence scores.
"""

# Magnitude Shift Detection
MAGNITUDE_LOG_THRESHOLD = 0.5  # |log10(ratio)| above this is a magnitude shift
SEVERE_DROP_RATIO = 0.1
SEVERE_INCREASE_RATIO = 10.0
SIGNIFICANT_SHIFT_LOW_RATIO = 0.5
SIGNIFICANT_SHIFT_HIGH_RATIO = 2.0
CONFIDENCE_SEVERE_MAGNITUDE = 95
CONFIDENCE_SIGNIFICANT_MAGNITUDE = 70

# Unit Conversion Detection
CONFIDENCE_UNIT_CONVERSION = 90

# Distribution Shift Detection
CV_RATIO_LOW = 0.5
CV_RATIO_HIGH = 2.0
MEDIAN_MEAN_SHIFT_THRESHOLD = 0.2
CONFIDENCE_VARIABILITY_SHIFT = 60
CONFIDENCE_SKEW_SHIFT = 55

# Range Anomaly Detection
RANGE_EXPANSION_RATIO = 5.0
RANGE_CONTRACTION_RATIO = 0.2
CONFIDENCE_RANGE_ANOMALY = 65

# Confidence Aggregation
MULTI_SIGNAL_BOOST = 5  # Added per extra firing detector
MULTI_SIGNAL_BOOST_CAP = 15
MAX_CONFIDENCE = 100

# Diagnostic Tiers
CONFIDENCE_HIGH = 90
CONFIDENCE_MEDIUM = 70
CONFIDENCE_LOW = 50

# Percentiles
LOWER_QUARTILE = 0.25
UPPER_QUARTILE = 0.75

# Artifact Status
ARTIFACT_STATUS_PASSED = "PASSED"
ARTIFACT_STATUS_FAILED = "FAILED"

# Run Status
RUN_STATUS_PASSED = "passed"
RUN_STATUS_FAILED = "failed"
RUN_STATUS_BASELINE_CREATED = "baseline_created"
RUN_STATUS_ERROR = "error"

# Supported File Types
FILE_TYPE_CSV = "csv"
FILE_TYPE_JSON = "json"
FILE_TYPE_PARQUET = "parquet"

# Prometheus Metrics Names
METRIC_CONFIDENCE_SCORE = "semantic_guard_confidence_score"
METRIC_ANOMALIES_DETECTED = "semantic_guard_anomalies_detected"
METRIC_DETECTOR_FIRED = "semantic_guard_detector_fired"
METRIC_RUN_STATUS = "semantic_guard_run_status"

# Version
GUARD_COMPONENT_VERSION = "1.0.0"
