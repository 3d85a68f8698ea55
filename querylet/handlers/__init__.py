"""Handler registry and provider base classes."""

from .registry import (
    CATEGORIES,
    INPUT,
    OUTPUT,
    WRITE,
    HandlerRegistry,
    default_registry,
    register_input_handler,
    register_output_handler,
    register_write_handler,
)
from .base import HandlerBase, InputHandler, OutputHandler, WriteHandler

__all__ = [
    "CATEGORIES",
    "INPUT",
    "OUTPUT",
    "WRITE",
    "HandlerRegistry",
    "default_registry",
    "register_input_handler",
    "register_output_handler",
    "register_write_handler",
    "HandlerBase",
    "InputHandler",
    "OutputHandler",
    "WriteHandler",
]
