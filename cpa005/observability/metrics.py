"""
Prometheus metrics collection for the CPA-005 converter

This module provides metrics instrumentation for monitoring
conversion volume, row outcomes and data quality.
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
# CONVERSION METRICS
# =======================

# Conversions counter
conversions_total = Counter(
    name="cpa005_conversions_total",
    documentation="Total number of payment list conversions",
    labelnames=["record_type", "status"],  # status: success, failure
    registry=REGISTRY,
)

# Conversion duration histogram
conversion_duration_seconds = Histogram(
    name="cpa005_conversion_duration_seconds",
    documentation="Time spent converting one payment list in seconds",
    labelnames=["record_type"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)

# Data rows by outcome
rows_processed_total = Counter(
    name="cpa005_rows_processed_total",
    documentation="Total number of data rows read",
    labelnames=["outcome"],  # outcome: converted, skipped, rejected
    registry=REGISTRY,
)

# =======================
# DATA QUALITY METRICS
# =======================

# Field contract failures
validation_failures_total = Counter(
    name="cpa005_validation_failures_total",
    documentation="Total number of field contract violations",
    labelnames=["field_name", "rule_type"],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Content type for the Prometheus text format"""
    return CONTENT_TYPE_LATEST


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(conversion_duration_seconds, record_type="credit"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


# =======================
# CONVERSION HELPERS
# =======================

def record_conversion(
    record_type: str,
    succeeded: bool,
    converted_rows: int,
    skipped_rows: int,
    rejected_rows: int,
) -> None:
    """
    Record the outcome of one conversion.

    Args:
        record_type: "credit" or "debit"
        succeeded: Whether the file was produced
        converted_rows: Rows that became detail records
        skipped_rows: Blank or suspended rows
        rejected_rows: Rows dropped because they could not be read or parsed
    """
    conversions_total.labels(
        record_type=record_type,
        status="success" if succeeded else "failure",
    ).inc()
    rows_processed_total.labels(outcome="converted").inc(converted_rows)
    rows_processed_total.labels(outcome="skipped").inc(skipped_rows)
    rows_processed_total.labels(outcome="rejected").inc(rejected_rows)
