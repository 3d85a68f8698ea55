"""Shared utilities."""

from .logging import ReportLoggerAdapter, get_report_logger, setup_logging

__all__ = ["ReportLoggerAdapter", "get_report_logger", "setup_logging"]
