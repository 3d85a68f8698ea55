"""Jinja2 template rendering for query text and report output."""

from pathlib import Path
from typing import Any, Dict, Optional


def _environment(loader=None, autoescape: bool = False):
    # Imported on use: a missing Jinja2 only matters once a template is rendered.
    from jinja2 import Environment

    return Environment(
        loader=loader,
        autoescape=autoescape,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_template(
    source: str, variables: Optional[Dict[str, Any]] = None, autoescape: bool = False
) -> str:
    """Render a template given as a string.

    Args:
        source: Template source text
        variables: Substitution context
        autoescape: HTML-escape substituted values

    Returns:
        Rendered text

    Raises:
        ImportError: If Jinja2 is not installed
    """
    env = _environment(autoescape=autoescape)
    template = env.from_string(source)
    return template.render(**(variables or {}))


def render_template_file(
    path: str, variables: Optional[Dict[str, Any]] = None, autoescape: bool = False
) -> str:
    """Render a template file, resolving includes relative to its directory."""
    from jinja2 import FileSystemLoader

    template_path = Path(path)
    env = _environment(
        loader=FileSystemLoader(str(template_path.parent)), autoescape=autoescape
    )
    template = env.get_template(template_path.name)
    return template.render(**(variables or {}))
