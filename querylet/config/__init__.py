"""Configuration management."""

from .config import (
    Config,
    DataSourceConfig,
    ReportConfig,
    LoggingConfig,
    load_config,
)

__all__ = [
    "Config",
    "DataSourceConfig",
    "ReportConfig",
    "LoggingConfig",
    "load_config",
]
