"""Querylet: render, run and report on a single SQL query."""

from .handlers import (
    HandlerRegistry,
    InputHandler,
    OutputHandler,
    WriteHandler,
    default_registry,
    register_input_handler,
    register_output_handler,
    register_write_handler,
)
from .query import Query, QueryError
from .builtin_handlers import register_builtin_handlers

register_builtin_handlers(default_registry)

__version__ = "0.32.0"

__all__ = [
    "HandlerRegistry",
    "InputHandler",
    "OutputHandler",
    "WriteHandler",
    "default_registry",
    "register_input_handler",
    "register_output_handler",
    "register_write_handler",
    "Query",
    "QueryError",
    "register_builtin_handlers",
]
