"""Interactive parameter input with line editing."""

from prompt_toolkit import PromptSession

from ..handlers.base import InputHandler


def from_prompt(query, parameter: str) -> None:
    """Read a parameter through a prompt_toolkit session.

    The session is kept in the scratchpad so every parameter of a query
    shares one input history.
    """
    session = query.scratchpad.get("prompt_session")
    if session is None:
        session = PromptSession()
        query.scratchpad["prompt_session"] = session
    query.inputs[parameter] = session.prompt(f"{parameter}> ")


class PromptInput(InputHandler):
    def default_type(self) -> str:
        return "prompt"

    def handler(self):
        return from_prompt
