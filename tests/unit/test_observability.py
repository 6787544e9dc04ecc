"""
Unit tests for logging and metrics helpers.
"""

import json
import logging

import pytest

from hmpi_pipeline.core.models import AnalysisSummary
from hmpi_pipeline.observability import metrics
from hmpi_pipeline.observability.logger import (
    CustomJsonFormatter,
    get_logger,
    log_operation,
    setup_logger,
)

pytestmark = pytest.mark.unit


def sample_value(name: str, labels: dict | None = None) -> float:
    value = metrics.REGISTRY.get_sample_value(name, labels or {})
    return value or 0.0


class TestLogger:
    """Tests for structured logging"""

    def test_setup_logger_level(self):
        logger = setup_logger("hmpi-test-level", level="debug")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_logger_does_not_duplicate_handlers(self):
        setup_logger("hmpi-test-dupes")
        logger = setup_logger("hmpi-test-dupes")
        assert len(logger.handlers) == 1

    def test_json_format(self):
        logger = setup_logger("hmpi-test-json", level="INFO", format_type="json")
        assert isinstance(logger.handlers[0].formatter, CustomJsonFormatter)

    def test_text_format(self):
        logger = setup_logger("hmpi-test-text", level="INFO", format_type="text")
        assert not isinstance(logger.handlers[0].formatter, CustomJsonFormatter)

    def test_json_record_fields(self):
        formatter = CustomJsonFormatter(fmt="%(timestamp)s %(level)s %(logger)s %(message)s")
        record = logging.LogRecord("hmpi", logging.WARNING, __file__, 1, "scored", None, None)
        payload = json.loads(formatter.format(record))
        assert payload["message"] == "scored"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "hmpi"
        assert "timestamp" in payload

    def test_get_logger_configures_once(self):
        logger = get_logger("hmpi-test-get")
        assert get_logger("hmpi-test-get") is logger
        assert len(logger.handlers) == 1

    def test_log_operation_success(self, caplog):
        logger = logging.getLogger("hmpi-test-operation")
        with caplog.at_level(logging.INFO, logger="hmpi-test-operation"):
            with log_operation("Scoring batch", logger=logger, sample_count=3) as operation:
                pass
        messages = [r.getMessage() for r in caplog.records]
        assert "Starting: Scoring batch" in messages
        assert "Completed: Scoring batch" in messages
        assert operation.duration >= 0.0

    def test_log_operation_failure_propagates(self, caplog):
        logger = logging.getLogger("hmpi-test-operation-failure")
        with caplog.at_level(logging.INFO, logger="hmpi-test-operation-failure"):
            with pytest.raises(RuntimeError):
                with log_operation("Reading file", logger=logger):
                    raise RuntimeError("boom")
        failed = [r for r in caplog.records if r.getMessage() == "Failed: Reading file"]
        assert failed
        assert failed[0].error_type == "RuntimeError"


class TestMetrics:
    """Tests for Prometheus metrics helpers"""

    def test_record_analysis_counts_tiers(self):
        before = sample_value("hmpi_samples_scored_total", {"status": "High Risk"})
        metrics.record_analysis(AnalysisSummary(
            total_samples=3, safe_samples=1, moderate_risk=1, high_risk=1, average_hmpi=56.3
        ))
        after = sample_value("hmpi_samples_scored_total", {"status": "High Risk"})
        assert after == before + 1

    def test_record_normalization(self):
        before = sample_value("hmpi_samples_normalized_total", {"source": "unit"})
        metrics.record_normalization("unit", 5)
        metrics.record_normalization("unit", 0)
        assert sample_value("hmpi_samples_normalized_total", {"source": "unit"}) == before + 5

    def test_track_duration(self):
        before = sample_value("hmpi_processing_duration_seconds_count", {"operation": "unit"})
        with metrics.track_duration(metrics.processing_duration_seconds, operation="unit"):
            pass
        after = sample_value("hmpi_processing_duration_seconds_count", {"operation": "unit"})
        assert after == before + 1

    def test_record_error(self):
        labels = {"error_type": "unit", "component": "tests"}
        before = sample_value("hmpi_errors_total", labels)
        metrics.record_error("unit", "tests")
        assert sample_value("hmpi_errors_total", labels) == before + 1

    def test_generate_metrics(self):
        output = metrics.generate_metrics()
        assert b"hmpi_samples_scored_total" in output
        assert metrics.get_content_type().startswith("text/plain")
