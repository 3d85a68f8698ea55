"""Configuration management for querylet reports."""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import yaml
from pathlib import Path


@dataclass
class DataSourceConfig:
    """Configuration for the data source a report runs against."""

    name: str
    type: str  # "postgresql" or "duckdb"
    config: Dict[str, Any]


@dataclass
class ReportConfig:
    """Handler selection and presentation settings applied to a Query."""

    input_type: str = "term"
    output_type: str = "csv"
    write_type: Optional[str] = None
    output_filename: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    options: Dict[str, Any] = field(default_factory=dict)
    query_vars: Optional[Dict[str, Any]] = None

    def apply(self, query) -> None:
        """Copy these settings onto a query."""
        query.input_type = self.input_type
        query.output_type = self.output_type
        if self.output_filename:
            query.output_filename = self.output_filename
        if self.write_type:
            query.write_type = self.write_type
        query.set_headers(self.headers)
        for name, value in self.options.items():
            query.option(name, value)
        if self.query_vars is not None:
            query.set_query_vars(self.query_vars)


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = "WARNING"
    structured: bool = False
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""

    datasource: DataSourceConfig = field(
        default_factory=lambda: DataSourceConfig(
            name="duckdb_mem",
            type="duckdb",
            config={"path": ":memory:", "read_only": False},
        )
    )
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: str) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Parsed configuration

    Example YAML format:
        datasource:
          name: drinks
          type: duckdb
          path: /data/drinks.duckdb
          read_only: true

        report:
          output_type: html
          output_filename: drinks.html
          headers:
            abv: Alcohol by volume
          options:
            template_file: templates/drinks.html.j2
          query_vars:
            min_abv: 25

        logging:
          level: INFO
          structured: false
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    # Parse data source
    ds_data = data.get("datasource")
    if ds_data:
        ds_data = dict(ds_data)
        ds_type = ds_data.pop("type")
        ds_name = ds_data.pop("name", ds_type)
        config.datasource = DataSourceConfig(name=ds_name, type=ds_type, config=ds_data)

    # Parse report settings
    report_data = data.get("report") or {}
    config.report = ReportConfig(**report_data)

    # Parse logging settings
    logging_data = data.get("logging") or {}
    config.logging = LoggingConfig(**logging_data)

    return config
