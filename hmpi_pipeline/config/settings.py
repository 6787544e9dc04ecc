"""
Settings management.

Loads pipeline settings from a YAML file and applies environment overrides.
The metal standards table is not configurable.
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

# Environment variables that override file settings
ENV_OVERRIDES = {
    "LOG_LEVEL": "log_level",
    "LOG_FORMAT": "log_format",
}


class PipelineSettings(BaseModel):
    """
    Runtime settings for readers, reports and logging.

    Attributes:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: "json" or "text"
        csv_delimiter: Delimiter used to read CSV input (reports are always
            comma-separated)
        excel_sheet: Sheet index or name read from workbooks
        report_filename: Suggested download name for CSV reports
    """

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    csv_delimiter: str = Field(",", min_length=1, max_length=1)
    excel_sheet: int | str = 0
    report_filename: str = Field("HMPI_Analysis_Report.csv", min_length=1)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    @field_validator("report_filename")
    @classmethod
    def check_report_extension(cls, v: str) -> str:
        if not v.lower().endswith(".csv"):
            raise ValueError("report_filename must end with .csv")
        return v

    class Config:
        extra = "forbid"


class SettingsLoader:
    """
    Loads PipelineSettings from a YAML configuration file.

    Expected YAML format:
    ```yaml
    logging:
      level: INFO
      format: json

    input:
      csv_delimiter: ","
      excel_sheet: 0

    report:
      filename: HMPI_Analysis_Report.csv
    ```
    """

    SECTIONS = {
        "logging": {"level": "log_level", "format": "log_format"},
        "input": {"csv_delimiter": "csv_delimiter", "excel_sheet": "excel_sheet"},
        "report": {"filename": "report_filename"},
    }

    def __init__(self, config_path: str | Path):
        """
        Initialize the settings loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")

    def load(self, environ: dict[str, str] | None = None) -> PipelineSettings:
        """
        Parse the YAML file and apply environment overrides.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Validated PipelineSettings

        Raises:
            ValueError: If the file has unknown sections or keys
            pydantic.ValidationError: If a value is invalid
        """
        with open(self.config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError("Settings file must contain a mapping at the top level")

        values: dict[str, Any] = {}
        for section_name, section in config.items():
            keys = self.SECTIONS.get(section_name)
            if keys is None:
                raise ValueError(f"Unknown settings section '{section_name}'")
            if not isinstance(section, dict):
                raise ValueError(f"Settings section '{section_name}' must be a mapping")
            for key, value in section.items():
                if key not in keys:
                    raise ValueError(f"Unknown setting '{section_name}.{key}'")
                values[keys[key]] = value

        values.update(_env_overrides(environ))
        return PipelineSettings(**values)


def _env_overrides(environ: dict[str, str] | None) -> dict[str, str]:
    env = os.environ if environ is None else environ
    return {field: env[name] for name, field in ENV_OVERRIDES.items() if env.get(name)}


def load_settings(config_path: str | Path | None = None, environ: dict[str, str] | None = None) -> PipelineSettings:
    """
    Load settings from a file when given, otherwise defaults plus environment.
    """
    if config_path is not None:
        return SettingsLoader(config_path).load(environ)
    return PipelineSettings(**_env_overrides(environ))
