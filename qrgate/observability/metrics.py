"""
Prometheus metrics collection for qrgate

This module provides metrics instrumentation for monitoring scan
volume, failure classes and operator attribution.
"""
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# SCAN METRICS
# =======================

# Parse attempts counter
scans_total = Counter(
    name="qr_scans_total",
    documentation="Total number of wristband codes parsed",
    labelnames=["status"],  # status: success, failure
    registry=REGISTRY,
)

# Parse failures by error code
parse_failures_total = Counter(
    name="qr_parse_failures_total",
    documentation="Total number of parse failures by error code",
    labelnames=["error_code"],
    registry=REGISTRY,
)

# Non-blocking warnings
validation_warnings_total = Counter(
    name="qr_validation_warnings_total",
    documentation="Total number of validation warnings (non-blocking issues)",
    labelnames=["field_name"],
    registry=REGISTRY,
)

# Parse/validate duration
parse_duration_seconds = Histogram(
    name="qr_parse_duration_seconds",
    documentation="Time spent parsing and validating a single code",
    labelnames=["operation"],  # operation: parse, validate
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
    registry=REGISTRY,
)

# =======================
# SUBMISSION METRICS
# =======================

# Payloads formatted for the verification endpoint
submissions_formatted_total = Counter(
    name="qr_submissions_formatted_total",
    documentation="Total number of submission payloads formatted",
    labelnames=["operator_resolved"],  # operator_resolved: true, false
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def get_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """
    Get content type for Prometheus metrics

    Returns:
        Content type string
    """
    return CONTENT_TYPE_LATEST


# =======================
# CONTEXT MANAGERS
# =======================

class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(parse_duration_seconds, operation="parse"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        """
        Initialize duration tracker

        Args:
            histogram: Prometheus Histogram metric
            **labels: Label values for the metric
        """
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        """Start timer"""
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timer"""
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


# =======================
# SCAN-SPECIFIC HELPERS
# =======================

def record_validation_warnings(warning_fields: list[str]) -> None:
    """Count one warning per entry, labelled by the field that raised it"""
    for field_name in warning_fields:
        increment_counter(validation_warnings_total, field_name=field_name)


def record_parse_success(warning_fields: list[str]) -> None:
    """
    Record a successful parse and its warnings

    Args:
        warning_fields: Field name of each warning raised
    """
    increment_counter(scans_total, status="success")
    record_validation_warnings(warning_fields)


def record_parse_failure(error_code: str, warning_fields: list[str] | None = None) -> None:
    """
    Record a failed parse and any warnings raised alongside its errors

    Args:
        error_code: Classified error code
        warning_fields: Field name of each warning raised
    """
    increment_counter(scans_total, status="failure")
    increment_counter(parse_failures_total, error_code=error_code)
    record_validation_warnings(warning_fields or [])


def record_submission_formatted(operator_resolved: bool) -> None:
    """
    Record a formatted submission payload

    Args:
        operator_resolved: Whether the identity provider supplied an operator
    """
    increment_counter(submissions_formatted_total, operator_resolved=str(operator_resolved).lower())
