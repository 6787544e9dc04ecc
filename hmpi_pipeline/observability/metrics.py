"""
Prometheus metrics collection for hmpi-pipeline

Counts normalized and scored samples per risk tier and tracks index
values and processing time.
"""
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from ..core.models import HIGH_RISK, MODERATE_RISK, SAFE, AnalysisSummary

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# PIPELINE METRICS
# =======================

samples_normalized_total = Counter(
    name="hmpi_samples_normalized_total",
    documentation="Total number of raw rows normalized into canonical samples",
    labelnames=["source"],  # source: rows, csv, excel
    registry=REGISTRY,
)

samples_scored_total = Counter(
    name="hmpi_samples_scored_total",
    documentation="Total number of samples scored, by risk tier",
    labelnames=["status"],
    registry=REGISTRY,
)

batch_size = Histogram(
    name="hmpi_batch_size_samples",
    documentation="Number of samples in each analyzed batch",
    buckets=[0, 1, 10, 50, 100, 500, 1000, 5000, 10000],
    registry=REGISTRY,
)

average_index_value = Histogram(
    name="hmpi_average_index_value",
    documentation="Average calculated HMPI of each analyzed batch",
    buckets=[1, 5, 10, 25, 50, 75, 100, 150, 250, 500],
    registry=REGISTRY,
)

processing_duration_seconds = Histogram(
    name="hmpi_processing_duration_seconds",
    documentation="Time spent per pipeline operation in seconds",
    labelnames=["operation"],  # operation: read, normalize, analyze, report
    buckets=[0.001, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0],
    registry=REGISTRY,
)

reports_generated_total = Counter(
    name="hmpi_reports_generated_total",
    documentation="Total number of CSV reports rendered",
    registry=REGISTRY,
)

# =======================
# ERROR METRICS
# =======================

errors_total = Counter(
    name="hmpi_errors_total",
    documentation="Total number of errors",
    labelnames=["error_type", "component"],
    registry=REGISTRY,
)


# =======================
# HELPERS
# =======================

def generate_metrics() -> bytes:
    """Render every hmpi metric in the Prometheus text exposition format."""
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST


def _child(metric, labels: dict):
    # Label-less metrics are used directly
    return metric.labels(**labels) if labels else metric


@contextmanager
def track_duration(histogram: Histogram, **labels) -> Iterator[None]:
    """
    Observe the wall time of the enclosed block, whether or not it raises.

    Usage:
        with track_duration(processing_duration_seconds, operation="analyze"):
            scored, summary = score_samples(records)
    """
    with _child(histogram, labels).time():
        yield


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    _child(counter, labels).inc(value)


def observe_histogram(histogram: Histogram, value: float, **labels) -> None:
    _child(histogram, labels).observe(value)


def record_normalization(source: str, sample_count: int) -> None:
    """Count rows normalized from a source (csv, excel or rows)."""
    if sample_count > 0:
        increment_counter(samples_normalized_total, sample_count, source=source)


def record_analysis(summary: AnalysisSummary) -> None:
    """
    Record the outcome of scoring a batch.

    Args:
        summary: Summary of the scored batch
    """
    tiers = {
        SAFE: summary.safe_samples,
        MODERATE_RISK: summary.moderate_risk,
        HIGH_RISK: summary.high_risk,
    }
    for status, count in tiers.items():
        increment_counter(samples_scored_total, count, status=status)
    observe_histogram(batch_size, summary.total_samples)
    if summary.total_samples > 0:
        observe_histogram(average_index_value, summary.average_hmpi)


def record_error(error_type: str, component: str) -> None:
    increment_counter(errors_total, error_type=error_type, component=component)
