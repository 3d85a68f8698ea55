"""Command line entry point for running a report query."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
import duckdb
import psycopg2
from jinja2 import TemplateError

from ..config import Config, DataSourceConfig, load_config
from ..datasources import create_datasource
from ..handlers import CATEGORIES, default_registry
from ..input.prompt import PromptInput
from ..output.parquet import ParquetOutput
from ..output.tabbed import TabbedOutput
from ..query import Query, QueryError
from ..utils.logging import get_report_logger, setup_logging

PLUGINS = {
    "parquet": ParquetOutput,
    "tabbed": TabbedOutput,
    "prompt": PromptInput,
}


def parse_assignments(ctx, param, values: Tuple[str, ...]) -> Dict[str, str]:
    """Turn repeated ``key=value`` options into a dict."""
    assignments: Dict[str, str] = {}
    for item in values:
        if "=" not in item:
            raise click.BadParameter(f"expected key=value, got '{item}'")
        key, value = item.split("=", 1)
        assignments[key.strip()] = value
    return assignments


def _load_config_bundle(config_path: Optional[str], duckdb_path: Optional[str]) -> Config:
    if config_path:
        config = load_config(config_path)
    else:
        config = Config()
    if duckdb_path:
        config.datasource = DataSourceConfig(
            name="duckdb",
            type="duckdb",
            config={"path": duckdb_path, "read_only": True},
        )
    return config


def build_query(
    config: Config,
    datasource,
    query_text: str,
    query_vars: Dict[str, str],
    headers: Dict[str, str],
    options: Dict[str, str],
    output_type: Optional[str],
    input_type: Optional[str],
    output_filename: Optional[str],
    binds: Tuple[str, ...],
) -> Query:
    """Configure a Query from the config file and command line overrides."""
    query = Query()
    query.set_dbh(datasource)
    config.report.apply(query)
    query.set_query(query_text)
    if query_vars:
        query.set_query_vars(query_vars)
    query.set_headers(headers)
    for name, value in options.items():
        query.option(name, value)
    if output_type:
        query.output_type = output_type
    if input_type:
        query.input_type = input_type
    if output_filename:
        query.output_filename = output_filename
    query.bind(*binds)
    return query


@click.group()
def cli() -> None:
    """Render, run and report on a SQL query."""


@cli.command()
@click.argument(
    "query_file", type=click.Path(exists=True, dir_okay=False, readable=True)
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, readable=True),
    help="Path to YAML config file. Defaults to an in-memory DuckDB database.",
)
@click.option("-d", "--duckdb", "duckdb_path", help="DuckDB database file to query.")
@click.option("--var", "query_vars", multiple=True, callback=parse_assignments,
              help="Template variable as key=value; marks the query as a template.")
@click.option("--bind", "binds", multiple=True, help="Bind parameter, in order.")
@click.option("--input", "inputs", multiple=True,
              help="Ask the input handler for a parameter and bind its value.")
@click.option("-t", "--output-type", help="Output handler type (csv, html, ...).")
@click.option("--input-type", help="Input handler type (term, ...).")
@click.option("-o", "--output", "output_filename", help="Write output to this file.")
@click.option("--header", "headers", multiple=True, callback=parse_assignments,
              help="Column header as column=label.")
@click.option("--option", "options", multiple=True, callback=parse_assignments,
              help="Handler option as name=value.")
@click.option("--plugin", "plugins", multiple=True, type=click.Choice(sorted(PLUGINS)),
              help="Register an optional handler.")
@click.option("--log-level", help="Logging level; overrides the config file.")
def run(
    query_file: str,
    config_path: Optional[str],
    duckdb_path: Optional[str],
    query_vars: Dict[str, str],
    binds: Tuple[str, ...],
    inputs: Tuple[str, ...],
    output_type: Optional[str],
    input_type: Optional[str],
    output_filename: Optional[str],
    headers: Dict[str, str],
    options: Dict[str, str],
    plugins: Tuple[str, ...],
    log_level: Optional[str],
) -> None:
    """Run the query in QUERY_FILE and write its output."""
    config = _load_config_bundle(config_path, duckdb_path)
    setup_logging(
        level=log_level or config.logging.level,
        structured=config.logging.structured,
        log_file=config.logging.log_file,
    )
    for plugin in plugins:
        PLUGINS[plugin].register()

    logger = get_report_logger(__name__, query_file, datasource=config.datasource.name)
    query_text = Path(query_file).read_text()
    datasource = create_datasource(config.datasource)
    try:
        datasource.connect()
        query = build_query(
            config,
            datasource,
            query_text,
            query_vars,
            headers,
            options,
            output_type,
            input_type,
            output_filename,
            binds,
        )
        for name in inputs:
            query.bind_more(query.input(name))
        query.write_output()
        logger.info(f"Report written with output type {query.output_type}")
    except (
        QueryError,
        ConnectionError,
        TemplateError,
        duckdb.Error,
        psycopg2.Error,
    ) as exc:
        logger.error(f"Report failed: {exc}")
        click.echo(f"error: {exc}", err=True)
        sys.exit(1)
    finally:
        datasource.disconnect()


@cli.command()
def handlers() -> None:
    """List registered handler types."""
    for category in CATEGORIES:
        types = default_registry.types(category)
        click.echo(f"{category}: {', '.join(types)}")
