"""Write output to standard output."""

import click


def to_stdout(query) -> None:
    """Print the query's output, or nothing if there is none."""
    click.echo(query.output() or "", nl=False)
