"""Logging configuration for querylet reports."""

import logging
import sys
import json
from pathlib import Path
from typing import Any, Dict, Optional
from datetime import datetime, timezone


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter for logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Report context attached by ReportLoggerAdapter
        report = getattr(record, "report", None)
        if report:
            log_data["report"] = report

        return json.dumps(log_data)


class StandardFormatter(logging.Formatter):
    """Standard human-readable formatter."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(
    level: str = "WARNING",
    structured: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Set up logging configuration.

    Console logs go to stderr; stdout is reserved for report output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        structured: Use structured JSON logging if True
        log_file: Optional log file path
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = StandardFormatter()

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    # Set level for third-party loggers to WARNING to reduce noise
    logging.getLogger("psycopg2").setLevel(logging.WARNING)


class ReportLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that tags records with the report being run."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Attach the report context and prefix the message with its name.

        Args:
            msg: Log message
            kwargs: Keyword arguments

        Returns:
            Tuple of (message, kwargs)
        """
        extra = kwargs.setdefault("extra", {})
        extra["report"] = dict(self.extra)
        return f"[{self.extra['name']}] {msg}", kwargs


def get_report_logger(name: str, query_file: str, **context: Any) -> ReportLoggerAdapter:
    """Get a logger that tags every record with a report's query file.

    Args:
        name: Logger name (typically __name__)
        query_file: Path of the report's query file
        **context: Further report fields, e.g. output_type

    Example:
        >>> logger = get_report_logger(__name__, "reports/drinks.sql", output_type="html")
        >>> logger.info("Report written")  # "[drinks] Report written"
    """
    report = {"name": Path(query_file).stem, "query_file": query_file}
    report.update(context)
    return ReportLoggerAdapter(logging.getLogger(name), report)
