"""Process-wide lookup tables for input, output and write handlers."""

from typing import Callable, Dict, List, Optional

INPUT = "input"
OUTPUT = "output"
WRITE = "write"

CATEGORIES = (INPUT, OUTPUT, WRITE)


class HandlerRegistry:
    """Maps handler type names to callables, one table per category.

    Registering a type that already has a handler quietly replaces it, which
    is how the built-in handlers get overridden. Entries are never removed.
    Not safe for concurrent registration from several threads.
    """

    def __init__(self):
        self._handlers: Dict[str, Dict[str, Callable]] = {}
        for category in CATEGORIES:
            self._handlers[category] = {}

    def register(self, category: str, type_name: str, handler: Callable) -> None:
        """Store a handler for the given category and type name.

        Args:
            category: One of "input", "output" or "write"
            type_name: Type name queries will select the handler by
            handler: Callable invoked by the query

        Raises:
            ValueError: If the category is unknown
        """
        self._table(category)[type_name] = handler

    def lookup(self, category: str, type_name: Optional[str]) -> Optional[Callable]:
        """Return the handler registered for a type name, or None."""
        return self._table(category).get(type_name)

    def types(self, category: str) -> List[str]:
        """Return registered type names for a category, sorted."""
        return sorted(self._table(category).keys())

    def _table(self, category: str) -> Dict[str, Callable]:
        if category not in self._handlers:
            raise ValueError(f"Unknown handler category: {category}")
        return self._handlers[category]

    def __repr__(self) -> str:
        counts = []
        for category in CATEGORIES:
            counts.append(f"{category}={len(self._handlers[category])}")
        return f"HandlerRegistry({', '.join(counts)})"


default_registry = HandlerRegistry()


def register_input_handler(type_name: str, handler: Callable) -> None:
    """Register an input handler on the default registry."""
    default_registry.register(INPUT, type_name, handler)


def register_output_handler(type_name: str, handler: Callable) -> None:
    """Register an output handler on the default registry."""
    default_registry.register(OUTPUT, type_name, handler)


def register_write_handler(type_name: str, handler: Callable) -> None:
    """Register a write handler on the default registry."""
    default_registry.register(WRITE, type_name, handler)
