"""Command line interface."""

from .querylet import cli

__all__ = ["cli"]
