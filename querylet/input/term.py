"""Prompt for parameters on the terminal."""

import sys

import click


def from_term(query, parameter: str) -> None:
    """Ask for a parameter on stdout and read one line from stdin."""
    click.echo(f"enter {parameter}: ", nl=False)
    value = sys.stdin.readline()
    query.inputs[parameter] = value.rstrip("\r\n")
