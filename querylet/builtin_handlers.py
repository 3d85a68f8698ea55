"""Registration of the handlers every query can use out of the box."""

from typing import Optional

from .handlers.registry import INPUT, OUTPUT, WRITE, HandlerRegistry, default_registry
from .input.term import from_term
from .output.csv import as_csv
from .output.template import as_template
from .write.file import to_file
from .write.stdout import to_stdout


def register_builtin_handlers(registry: Optional[HandlerRegistry] = None) -> HandlerRegistry:
    """Register the built-in handlers, replacing any registered under their names.

    Registers output types csv, template and html, write types file and
    stdout, and input type term.
    """
    if registry is None:
        registry = default_registry
    registry.register(OUTPUT, "csv", as_csv)
    registry.register(OUTPUT, "template", as_template)
    registry.register(OUTPUT, "html", as_template)
    registry.register(WRITE, "file", to_file)
    registry.register(WRITE, "stdout", to_stdout)
    registry.register(INPUT, "term", from_term)
    return registry
