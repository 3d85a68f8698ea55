"""Base classes for handler providers.

A provider bundles a handler function with the type name it is normally
registered under. Registration is explicit::

    class TabbedOutput(OutputHandler):
        def default_type(self):
            return "tabbed"

        def handler(self):
            return as_tabbed

    TabbedOutput.register()          # registered as "tabbed"
    TabbedOutput.register("tsv")     # or under another name
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .registry import INPUT, OUTPUT, WRITE, HandlerRegistry, default_registry


class HandlerBase(ABC):
    """Abstract provider of a single handler."""

    category: str = ""

    @abstractmethod
    def default_type(self) -> str:
        """Return the type name used when no override is given."""
        pass

    @abstractmethod
    def handler(self) -> Callable:
        """Return the handler callable to register."""
        pass

    @classmethod
    def register(
        cls,
        type_name: Optional[str] = None,
        registry: Optional[HandlerRegistry] = None,
    ) -> str:
        """Register this provider's handler.

        Args:
            type_name: Type name override; defaults to default_type()
            registry: Registry to register into; defaults to the process-wide one

        Returns:
            The type name the handler was registered under

        Raises:
            TypeError: If the provider does not implement default_type/handler
        """
        provider = cls()
        if not type_name:
            type_name = provider.default_type()
        if registry is None:
            registry = default_registry
        registry.register(cls.category, type_name, provider.handler())
        return type_name


class InputHandler(HandlerBase):
    """Provider of an input handler, called as ``handler(query, parameter)``."""

    category = INPUT


class OutputHandler(HandlerBase):
    """Provider of an output handler, called as ``handler(query)``."""

    category = OUTPUT


class WriteHandler(HandlerBase):
    """Provider of a write handler, called as ``handler(query)``."""

    category = WRITE
