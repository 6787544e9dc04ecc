"""
Integration tests for the batch analysis pipeline.

Tests the complete flow: file → raw rows → canonical samples → scores → report
"""

import csv
import io

import pytest

from hmpi_pipeline.batch import ANALYSIS_COMPLETED_MESSAGE, NO_DATA_MESSAGE, AnalysisPipeline
from hmpi_pipeline.config import PipelineSettings
from hmpi_pipeline.observability import metrics
from hmpi_pipeline.reporting import REPORT_HEADER

pytestmark = pytest.mark.integration


@pytest.fixture
def pipeline() -> AnalysisPipeline:
    return AnalysisPipeline()


class TestAnalyzeFile:
    """Tests for analyze_file"""

    def test_csv_survey(self, pipeline, survey_csv):
        result = pipeline.analyze_file(survey_csv)
        assert result.message == ANALYSIS_COMPLETED_MESSAGE
        assert result.count == 3
        assert [r.sample_id for r in result.results] == ["G1", "G2", "G3"]
        assert [r.status for r in result.results] == ["Safe", "Moderate Risk", "High Risk"]
        assert [r.calculated_hmpi for r in result.results] == [2.22, 55.56, 111.11]
        assert result.summary.total_samples == 3
        assert result.summary.average_hmpi == pytest.approx((2.22 + 55.56 + 111.11) / 3)

    def test_excel_survey(self, pipeline, survey_xlsx):
        result = pipeline.analyze_file(survey_xlsx)
        assert [r.sample_id for r in result.results] == ["1", "2", "3"]
        assert [r.location for r in result.results] == ["Ludhiana", "Bathinda", "Mansa"]
        assert [r.status for r in result.results] == ["Safe", "Moderate Risk", "High Risk"]
        assert result.results[0].longitude == 75.85

    def test_csv_and_excel_agree(self, pipeline, survey_csv, survey_xlsx):
        from_csv = pipeline.analyze_file(survey_csv)
        from_excel = pipeline.analyze_file(survey_xlsx)
        assert [r.calculated_hmpi for r in from_csv.results] == [
            r.calculated_hmpi for r in from_excel.results
        ]

    def test_blank_unit_column_falls_back_to_bare_header(self, pipeline, tmp_path):
        """Test a sheet mixing header conventions across rows"""
        path = tmp_path / "mixed.csv"
        path.write_text("S. No.,As μg/L,As\nG1,20,\nG2,,450\n", encoding="utf-8")
        result = pipeline.analyze_file(path)
        assert [r.As for r in result.results] == [20.0, 450.0]
        assert [r.calculated_hmpi for r in result.results] == [2.22, 50.0]

    def test_header_only_file(self, pipeline, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("S. No.,As\n", encoding="utf-8")
        result = pipeline.analyze_file(path)
        assert result.message == NO_DATA_MESSAGE
        assert result.count == 0
        assert result.results == []
        assert result.summary.model_dump(by_alias=True) == {
            "totalSamples": 0,
            "safeSamples": 0,
            "moderateRisk": 0,
            "highRisk": 0,
            "averageHMPI": 0.0,
        }

    def test_records_metrics(self, pipeline, survey_csv):
        labels = {"source": "csv"}
        before = metrics.REGISTRY.get_sample_value("hmpi_samples_normalized_total", labels) or 0.0
        pipeline.analyze_file(survey_csv)
        after = metrics.REGISTRY.get_sample_value("hmpi_samples_normalized_total", labels)
        assert after == before + 3


class TestAnalyzeRecords:
    """Tests for analyzing rows and stored documents"""

    def test_analyze_rows(self, pipeline, survey_rows):
        result = pipeline.analyze_rows(survey_rows)
        assert result.summary.high_risk == 1

    def test_analyze_stored_documents(self, pipeline, survey_rows):
        """Test canonical documents round-trip through storage form"""
        documents = [sample.to_document() for sample in pipeline.normalize(survey_rows)]
        result = pipeline.analyze(documents)
        assert [r.status for r in result.results] == ["Safe", "Moderate Risk", "High Risk"]

    def test_score_only(self, pipeline, survey_rows):
        scored = pipeline.score(pipeline.normalize(survey_rows))
        assert len(scored) == 3

    def test_payload_is_json_ready(self, pipeline, survey_rows):
        import json

        payload = pipeline.analyze_rows(survey_rows).to_payload()
        decoded = json.loads(json.dumps(payload))
        assert decoded["count"] == 3
        assert decoded["results"][1]["calculatedHMPI"] == 55.56
        assert decoded["summary"]["moderateRisk"] == 1


class TestReports:
    """Tests for report generation"""

    def test_report_for_file(self, pipeline, survey_csv):
        report = pipeline.report_for_file(survey_csv)
        rows = list(csv.reader(io.StringIO(report)))
        assert tuple(rows[0]) == REPORT_HEADER
        assert len(rows) == 4
        assert rows[1][0] == "G1"
        assert rows[1][-2:] == ["2.22", "Safe"]
        assert rows[3][-2:] == ["111.11", "High Risk"]

    def test_semicolon_input_gives_comma_report(self, survey_csv):
        """Test the input delimiter does not leak into the report"""
        pipeline = AnalysisPipeline(PipelineSettings(csv_delimiter=";"))
        path = survey_csv.with_name("semicolon.csv")
        path.write_text(survey_csv.read_text(encoding="utf-8").replace(",", ";"), encoding="utf-8")
        lines = pipeline.report_for_file(path).splitlines()
        assert lines[0] == ",".join(REPORT_HEADER)
        assert lines[0] == (
            "Sample ID,Location,Latitude,Longitude,pH,TDS,"
            "As,Cd,Cr,Cu,Fe,Mn,Ni,Pb,Zn,Calculated HMPI,Status"
        )
        assert lines[1].endswith(",2.22,Safe")

    def test_semicolon_rows_give_comma_report(self, tmp_path):
        pipeline = AnalysisPipeline(PipelineSettings(csv_delimiter=";"))
        path = tmp_path / "mansa.csv"
        path.write_text("Location;As\nMansa;20\n", encoding="utf-8")
        lines = pipeline.report_for_file(path).splitlines()
        assert lines[0] == ",".join(REPORT_HEADER)
        assert lines[1] == ",Mansa,0,0,0,0,20,0,0,0,0,0,0,0,0,2.22,Safe"

    def test_empty_report(self, pipeline):
        assert pipeline.generate_report([]) == ",".join(REPORT_HEADER) + "\n"
