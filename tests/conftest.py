"""
Pytest configuration and fixtures for hmpi-pipeline tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import pandas as pd
import pytest

from hmpi_pipeline.core.models import CanonicalSample


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for the pure normalization and scoring core"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that read real CSV/XLSX files from disk"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that drive the command-line interface"
    )


# =======================
# SAMPLE DATA FIXTURES
# =======================

SURVEY_HEADERS = [
    "S. No.",
    "Locations",
    "Longitude (degrees in decimal)",
    "Latitude (degrees in decimal)",
    "pH",
    "EC μS/cm at 25 °C",
    "TDS mg/L",
    "As μg/L",
    "Cd μg/L",
    "Cr μg/L",
    "Cu μg/L",
    "Fe μg/L",
    "Mn μg/L",
    "Ni μg/L",
    "Pb μg/L",
    "Zn μg/L",
]


@pytest.fixture
def survey_row() -> dict:
    """A raw row as read from a survey sheet with unit-qualified headers"""
    return {
        "S. No.": "G1",
        "Locations": "Ludhiana",
        "Longitude (degrees in decimal)": "75.85",
        "Latitude (degrees in decimal)": "30.90",
        "pH": "7.4",
        "EC μS/cm at 25 °C": "512",
        "TDS mg/L": "330",
        "As μg/L": "20",
        "Cd μg/L": "",
        "Cr μg/L": "0",
        "Cu μg/L": "0",
        "Fe μg/L": "0",
        "Mn μg/L": "0",
        "Ni μg/L": "0",
        "Pb μg/L": "0",
        "Zn μg/L": "0",
    }


@pytest.fixture
def survey_rows() -> list[dict]:
    """Three rows, one per risk tier (Safe, Moderate Risk, High Risk)"""
    return [
        {"S. No.": "G1", "Locations": "Ludhiana", "Longitude (degrees in decimal)": "75.85",
         "Latitude (degrees in decimal)": "30.90", "pH": "7.4", "As μg/L": "20"},
        {"S. No.": "G2", "Locations": "Bathinda", "Longitude (degrees in decimal)": "74.95",
         "Latitude (degrees in decimal)": "30.21", "pH": "7.9", "As μg/L": "500"},
        {"S. No.": "G3", "Locations": "Mansa", "Longitude (degrees in decimal)": "75.39",
         "Latitude (degrees in decimal)": "29.99", "pH": "8.1", "Pb μg/L": "1000"},
    ]


@pytest.fixture
def make_sample():
    """Factory for CanonicalSample with all readings zero unless overridden"""

    def _make(**fields) -> CanonicalSample:
        return CanonicalSample(**fields)

    return _make


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def survey_csv(tmp_path, survey_rows):
    """Survey rows written as a CSV file with unit-qualified headers"""
    path = tmp_path / "survey.csv"
    df = pd.DataFrame(survey_rows, columns=SURVEY_HEADERS)
    df.to_csv(path, index=False)
    return path


@pytest.fixture
def survey_xlsx(tmp_path):
    """Survey workbook with numeric cells, as exported from a spreadsheet"""
    path = tmp_path / "survey.xlsx"
    df = pd.DataFrame(
        [
            {"S. No.": 1, "Location": "Ludhiana", "Longitude": 75.85, "Latitude": 30.90, "As": 20},
            {"S. No.": 2, "Location": "Bathinda", "Longitude": 74.95, "Latitude": 30.21, "As": 500},
            {"S. No.": 3, "Location": "Mansa", "Longitude": 75.39, "Latitude": 29.99, "Pb": 1000},
        ],
        columns=["S. No.", "Location", "Longitude", "Latitude", "As", "Pb"],
    )
    df.to_excel(path, index=False, engine="openpyxl")
    return path
