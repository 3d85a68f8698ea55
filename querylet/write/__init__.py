"""Write handlers: send formatted output somewhere."""

from .file import to_file
from .stdout import to_stdout

__all__ = ["to_file", "to_stdout"]
