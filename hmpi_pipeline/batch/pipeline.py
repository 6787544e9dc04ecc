"""
Batch analysis pipeline orchestration.

Coordinates the flow: read → normalize → score → summarize → report
"""

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from hmpi_pipeline.config import PipelineSettings
from hmpi_pipeline.core.models import AnalysisResult, CanonicalSample, ScoredSample
from hmpi_pipeline.core.normalization import normalize_rows
from hmpi_pipeline.core.scoring import score_samples
from hmpi_pipeline.observability import metrics
from hmpi_pipeline.observability.logger import get_logger, log_operation
from hmpi_pipeline.reporting import render_report

from .readers import FileReader

logger = get_logger(__name__)

ANALYSIS_COMPLETED_MESSAGE = "Analysis completed"
NO_DATA_MESSAGE = "No data found"


class AnalysisPipeline:
    """
    Orchestrates groundwater sample analysis.

    Flow:
    1. Read raw rows from a CSV or workbook (optional; rows may be passed in)
    2. Normalize rows into canonical samples
    3. Score each sample and classify its risk tier
    4. Summarize the batch
    5. Render the CSV report on request
    """

    def __init__(self, settings: PipelineSettings | None = None):
        """
        Initialize analysis pipeline.

        Args:
            settings: Pipeline settings (defaults if None)
        """
        self.settings = settings or PipelineSettings()
        self.file_reader = FileReader(
            csv_delimiter=self.settings.csv_delimiter,
            excel_sheet=self.settings.excel_sheet,
        )

    def read(self, file_path: str | Path) -> tuple[list[dict[str, Any]], str]:
        """
        Read raw rows from a file.

        Returns:
            Tuple of (raw rows, source type "csv" or "excel")
        """
        source_type = self.file_reader.source_type(file_path)
        with metrics.track_duration(metrics.processing_duration_seconds, operation="read"):
            with log_operation("Reading file", logger=logger, file_path=str(file_path)):
                rows = self.file_reader.read(file_path)
        logger.info(f"Read {len(rows)} rows from {file_path}")
        return rows, source_type

    def normalize(self, rows: Iterable[Mapping[Any, Any]], source: str = "rows") -> list[CanonicalSample]:
        """
        Normalize raw rows into canonical samples.

        Args:
            rows: Raw rows from any tabular source
            source: Source label for metrics

        Returns:
            Canonical samples in row order
        """
        with metrics.track_duration(metrics.processing_duration_seconds, operation="normalize"):
            samples = normalize_rows(rows)
        metrics.record_normalization(source, len(samples))
        logger.debug(f"Normalized {len(samples)} rows", extra={"source": source})
        return samples

    def score(
        self, records: Sequence[CanonicalSample | Mapping[str, Any]]
    ) -> list[ScoredSample]:
        """Score canonical samples without building the summary payload."""
        scored, _ = score_samples(records)
        return scored

    def analyze(self, records: Sequence[CanonicalSample | Mapping[str, Any]]) -> AnalysisResult:
        """
        Score a batch of canonical samples and build the response payload.

        Args:
            records: Canonical samples, or canonical documents from storage

        Returns:
            AnalysisResult with per-sample results and the batch summary
        """
        with metrics.track_duration(metrics.processing_duration_seconds, operation="analyze"):
            scored, summary = score_samples(records)
        metrics.record_analysis(summary)

        if summary.total_samples == 0:
            logger.warning("No samples to analyze")
            return AnalysisResult(message=NO_DATA_MESSAGE, count=0, results=[], summary=summary)

        logger.info(
            "Analysis complete: "
            f"{summary.safe_samples} safe, {summary.moderate_risk} moderate risk, "
            f"{summary.high_risk} high risk",
            extra={
                "total_samples": summary.total_samples,
                "average_hmpi": summary.average_hmpi,
            },
        )
        return AnalysisResult(
            message=ANALYSIS_COMPLETED_MESSAGE,
            count=len(scored),
            results=scored,
            summary=summary,
        )

    def analyze_rows(self, rows: Iterable[Mapping[Any, Any]], source: str = "rows") -> AnalysisResult:
        """Normalize raw rows, then analyze them."""
        return self.analyze(self.normalize(rows, source=source))

    def analyze_file(self, file_path: str | Path) -> AnalysisResult:
        """
        Process a file through the complete pipeline.

        Args:
            file_path: Path to a .csv, .xlsx or .xls file

        Returns:
            AnalysisResult for every data row of the file
        """
        rows, source_type = self.read(file_path)
        return self.analyze_rows(rows, source=source_type)

    def generate_report(self, records: Sequence[CanonicalSample | Mapping[str, Any]]) -> str:
        """
        Score samples and render the CSV report.

        Returns:
            CSV text with the fixed report header
        """
        with metrics.track_duration(metrics.processing_duration_seconds, operation="report"):
            scored, summary = score_samples(records)
            report = render_report(scored)
        metrics.record_analysis(summary)
        metrics.increment_counter(metrics.reports_generated_total)
        logger.info(f"Rendered report for {summary.total_samples} samples")
        return report

    def report_for_file(self, file_path: str | Path) -> str:
        """Read, normalize and score a file, then render its CSV report."""
        rows, source_type = self.read(file_path)
        return self.generate_report(self.normalize(rows, source=source_type))
