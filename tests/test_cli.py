"""Tests for the querylet CLI."""

import duckdb
import pyarrow.parquet as pq
import pytest
from click.testing import CliRunner

from querylet.cli.querylet import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Leave the root logger alone while the CLI runs."""
    monkeypatch.setattr("querylet.cli.querylet.setup_logging", lambda **kwargs: None)


@pytest.fixture
def drinks_db(tmp_path):
    """DuckDB file with a small drinks table."""
    path = tmp_path / "drinks.duckdb"
    connection = duckdb.connect(str(path))
    connection.execute("CREATE TABLE drinks (id INTEGER, name VARCHAR, base VARCHAR)")
    connection.execute(
        "INSERT INTO drinks VALUES (1, 'Daiquiri', 'rum'), (2, 'Martini', 'gin'), "
        "(3, 'Mojito', 'rum')"
    )
    connection.close()
    return str(path)


def write_query(tmp_path, text):
    path = tmp_path / "query.sql"
    path.write_text(text)
    return str(path)


def test_run_prints_csv(drinks_db, tmp_path):
    """run prints CSV for a plain query."""
    query_file = write_query(tmp_path, "SELECT id, name FROM drinks ORDER BY id")

    result = CliRunner().invoke(cli, ["run", query_file, "-d", drinks_db])

    assert result.exit_code == 0, result.output
    assert result.output == (
        'id,name\n"1","Daiquiri"\n"2","Martini"\n"3","Mojito"\n'
    )


def test_run_with_vars_binds_and_headers(drinks_db, tmp_path):
    """Template vars, bind parameters and headers reach the query."""
    query_file = write_query(
        tmp_path, "SELECT {{ column }} FROM drinks WHERE base = ? ORDER BY id"
    )

    result = CliRunner().invoke(
        cli,
        [
            "run", query_file, "-d", drinks_db,
            "--var", "column=name",
            "--bind", "rum",
            "--header", "name=Drink",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output == 'Drink\n"Daiquiri"\n"Mojito"\n'


def test_run_with_term_input(drinks_db, tmp_path):
    """--input asks for a value and binds it."""
    query_file = write_query(tmp_path, "SELECT name FROM drinks WHERE base = ?")

    result = CliRunner().invoke(
        cli, ["run", query_file, "-d", drinks_db, "--input", "base"], input="gin\n"
    )

    assert result.exit_code == 0, result.output
    assert "enter base: " in result.output
    assert result.output.endswith('name\n"Martini"\n')


def test_run_writes_file(drinks_db, tmp_path):
    """-o writes the output to a file instead of stdout."""
    query_file = write_query(tmp_path, "SELECT name FROM drinks WHERE id = 2")
    out = tmp_path / "report.html"

    result = CliRunner().invoke(
        cli, ["run", query_file, "-d", drinks_db, "-t", "html", "-o", str(out)]
    )

    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert "<td>Martini</td>" in out.read_text()


def test_run_with_config_file(drinks_db, tmp_path):
    """Report settings come from the config file."""
    config_file = tmp_path / "querylet.yaml"
    config_file.write_text(
        f"""
datasource:
  type: duckdb
  path: {drinks_db}
report:
  output_type: tabbed
  headers:
    name: Drink
  query_vars:
    base: rum
"""
    )
    query_file = write_query(
        tmp_path, "SELECT name FROM drinks WHERE base = '{{ base }}' ORDER BY id"
    )

    result = CliRunner().invoke(
        cli, ["run", query_file, "-c", str(config_file), "--plugin", "tabbed"]
    )

    assert result.exit_code == 0, result.output
    assert result.output == "Drink\nDaiquiri\nMojito\n"


def test_run_parquet_plugin(drinks_db, tmp_path):
    """The parquet plugin writes through the deferred writer."""
    query_file = write_query(tmp_path, "SELECT id, name FROM drinks ORDER BY id")
    out = tmp_path / "drinks.parquet"

    result = CliRunner().invoke(
        cli,
        [
            "run", query_file, "-d", drinks_db,
            "--plugin", "parquet", "-t", "parquet", "-o", str(out),
        ],
    )

    assert result.exit_code == 0, result.output
    assert pq.read_table(str(out)).column("name").to_pylist() == [
        "Daiquiri", "Martini", "Mojito",
    ]


def test_run_reports_sql_errors(drinks_db, tmp_path):
    """Database errors are printed and exit non-zero."""
    query_file = write_query(tmp_path, "SELECT * FROM no_such_table")

    result = CliRunner().invoke(cli, ["run", query_file, "-d", drinks_db])

    assert result.exit_code == 1
    assert "error:" in result.output


def test_run_rejects_malformed_assignment(drinks_db, tmp_path):
    """--var needs key=value."""
    query_file = write_query(tmp_path, "SELECT 1")

    result = CliRunner().invoke(
        cli, ["run", query_file, "-d", drinks_db, "--var", "oops"]
    )

    assert result.exit_code == 2
    assert "expected key=value" in result.output


def test_run_defaults_to_memory_database(tmp_path):
    """Without a config or database file the query runs in memory."""
    query_file = write_query(tmp_path, "SELECT 42 AS answer")

    result = CliRunner().invoke(cli, ["run", query_file])

    assert result.exit_code == 0, result.output
    assert result.output == 'answer\n"42"\n'


def test_handlers_lists_types():
    """handlers lists the registered types per category."""
    result = CliRunner().invoke(cli, ["handlers"])

    assert result.exit_code == 0
    assert result.output == (
        "input: term\n"
        "output: csv, html, template\n"
        "write: file, stdout\n"
    )
