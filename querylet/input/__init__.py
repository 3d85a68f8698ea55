"""Input handlers: collect parameter values for a query."""

from .term import from_term
from .prompt import PromptInput, from_prompt

__all__ = ["from_term", "PromptInput", "from_prompt"]
