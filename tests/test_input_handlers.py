"""Tests for input handlers."""

import io

from querylet import Query
from querylet.handlers import HandlerRegistry, default_registry
from querylet.input import PromptInput, from_prompt, from_term


def test_term_prompts_and_reads_line(monkeypatch, capsys):
    """The term handler prompts on stdout and reads one line of stdin."""
    monkeypatch.setattr("sys.stdin", io.StringIO("42\nignored\n"))
    query = Query()

    from_term(query, "userid")

    assert query.inputs == {"userid": "42"}
    assert capsys.readouterr().out == "enter userid: "


def test_term_is_default_input(monkeypatch, capsys):
    """Query.input uses the term handler and asks only once."""
    monkeypatch.setattr("sys.stdin", io.StringIO("rum\ngin\n"))
    query = Query()

    assert query.input("liquor") == "rum"
    assert query.input("liquor") == "rum"
    assert capsys.readouterr().out == "enter liquor: "


def test_term_at_end_of_input(monkeypatch):
    """End of input is read as an empty value."""
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    query = Query()

    from_term(query, "userid")

    assert query.inputs["userid"] == ""


class FakeSession:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def prompt(self, message):
        self.prompts.append(message)
        return self.answers.pop(0)


def test_prompt_handler_shares_session(monkeypatch):
    """One prompt session is created per query and reused."""
    sessions = []

    def make_session():
        session = FakeSession(["rum", "7"])
        sessions.append(session)
        return session

    monkeypatch.setattr("querylet.input.prompt.PromptSession", make_session)
    query = Query()

    from_prompt(query, "liquor")
    from_prompt(query, "limit")

    assert query.inputs == {"liquor": "rum", "limit": "7"}
    assert len(sessions) == 1
    assert sessions[0].prompts == ["liquor> ", "limit> "]


def test_prompt_provider_registration():
    """PromptInput registers as the prompt input type."""
    registry = HandlerRegistry()

    assert PromptInput.register(registry=registry) == "prompt"
    assert registry.lookup("input", "prompt") is from_prompt


def test_prompt_override_replaces_term(monkeypatch):
    """Registering the prompt provider as term replaces the default input."""
    monkeypatch.setattr(
        "querylet.input.prompt.PromptSession", lambda: FakeSession(["gin"])
    )
    PromptInput.register("term")

    query = Query()

    assert default_registry.lookup("input", "term") is from_prompt
    assert query.input("liquor") == "gin"
