"""Query renders, runs and formats a single report query.

A Query is configured with a data source, query text (optionally a template)
and bind parameters. Nothing touches the database until results, columns or
output are asked for; each stage runs once and its result is kept::

    query = Query()
    query.set_dbh(datasource)
    query.set_query("SELECT * FROM drinks WHERE abv > {{ min_abv }} AND base = ?")
    query.set_query_vars({"min_abv": 25})
    query.bind("rum")
    query.output_type = "html"
    query.write_output()
"""

from typing import Any, Dict, List, Optional
import logging

from .handlers.registry import INPUT, OUTPUT, WRITE, HandlerRegistry, default_registry
from .rendering import render_template

logger = logging.getLogger(__name__)

_UNSET = object()


class QueryError(RuntimeError):
    """Raised when a query cannot run with its current configuration."""


class Query:
    """Lazy execution and rendering pipeline for one report query."""

    def __init__(self, registry: Optional[HandlerRegistry] = None):
        """Initialize an empty query.

        Args:
            registry: Handler registry to dispatch through; defaults to the
                process-wide registry holding the built-in handlers
        """
        if registry is None:
            registry = default_registry
        self.registry = registry
        self.dbh = None
        self.query_text: Optional[str] = None
        self.query_vars: Optional[Dict[str, Any]] = None
        self.bind_parameters: List[Any] = []
        self.headers: Dict[str, str] = {}
        self.inputs: Dict[str, Any] = {}
        self._needs_render = False
        self._columns: Optional[List[str]] = None
        self._results: Optional[List[Dict[str, Any]]] = None
        self._output: Any = _UNSET
        self._scratchpad: Optional[Dict[str, Any]] = None
        self._input_type = "term"
        self._output_type = "csv"
        self._write_type: Optional[str] = None
        self._output_filename: Optional[str] = None

    def set_dbh(self, dbh) -> None:
        """Set the data source the query runs against."""
        self.dbh = dbh

    def set_query(self, text: str) -> None:
        """Set the query text, plain SQL or a template."""
        self.query_text = text
        self._needs_render = self.query_vars is not None

    def set_query_vars(self, variables: Dict[str, Any]) -> None:
        """Merge template variables and mark the query text as a template.

        Calling this at all, even with an empty mapping, means the query
        text is rendered before it runs.
        """
        if self.query_vars is None:
            self.query_vars = {}
        self.query_vars = {**self.query_vars, **variables}
        self._needs_render = True

    def bind(self, *parameters: Any) -> None:
        """Replace the bind parameters."""
        self.bind_parameters = list(parameters)

    def bind_more(self, *parameters: Any) -> None:
        """Append to the bind parameters."""
        self.bind_parameters.extend(parameters)

    def render_query(self) -> str:
        """Render the query text with the query variables."""
        return render_template(self.query_text, self.query_vars or {})

    def run(self) -> List[Dict[str, Any]]:
        """Render the query if needed, execute it and store the results.

        Returns:
            The result rows

        Raises:
            QueryError: If no data source or query text has been set
        """
        if self.dbh is None:
            raise QueryError("No database handle set for query")
        if self.query_text is None:
            raise QueryError("No query text set")

        if self._needs_render:
            self.query_text = self.render_query()
            self._needs_render = False

        logger.debug(f"Running query with {len(self.bind_parameters)} bind parameters")
        statement = self.dbh.prepare(self.query_text)
        statement.execute(*self.bind_parameters)
        self._columns = statement.column_names()
        self._results = statement.fetch_rows()
        return self._results

    def results(self) -> List[Dict[str, Any]]:
        """Return result rows, running the query first if needed.

        The rows are the stored dicts, not copies; changes made to them show
        up in later output.
        """
        if self._results is None:
            self.run()
        return self._results

    def set_results(self, rows: List[Dict[str, Any]]) -> None:
        """Replace the result rows without running the query."""
        self._results = rows

    def columns(self) -> List[str]:
        """Return result column names, running the query first if needed."""
        if self._columns is None:
            self.run()
        return self._columns

    def set_columns(self, columns: List[str]) -> None:
        """Replace the column names without running the query."""
        self._columns = columns

    def header(self, column: str) -> str:
        """Return the display header for a column, or the column name.

        Labels are returned as text whatever type they were set with.
        """
        return str(self.headers.get(column, column))

    def set_headers(self, headers: Dict[str, str]) -> None:
        """Merge column display headers."""
        for column, header in headers.items():
            self.headers[column] = header

    @property
    def scratchpad(self) -> Dict[str, Any]:
        """Free-form notes shared between handlers for this query."""
        if self._scratchpad is None:
            self._scratchpad = {}
        return self._scratchpad

    def option(self, name: str, *value: Any) -> Any:
        """Get an option, or set it when a value is given.

        Options live in the scratchpad.
        """
        if value:
            self.scratchpad[name] = value[0]
            return value[0]
        return self.scratchpad.get(name)

    @property
    def input_type(self) -> str:
        return self._input_type

    @input_type.setter
    def input_type(self, type_name: str) -> None:
        self._input_type = type_name

    @property
    def output_type(self) -> str:
        return self._output_type

    @output_type.setter
    def output_type(self, type_name: str) -> None:
        self._output_type = type_name

    @property
    def write_type(self) -> Optional[str]:
        return self._write_type

    @write_type.setter
    def write_type(self, type_name: Optional[str]) -> None:
        self._write_type = type_name

    @property
    def output_filename(self) -> Optional[str]:
        """File output is written to; setting one selects the file writer."""
        return self._output_filename

    @output_filename.setter
    def output_filename(self, filename: Optional[str]) -> None:
        self._write_type = "file" if filename else None
        self._output_filename = filename

    def input(self, parameter: str) -> Any:
        """Return a parameter value, asking the input handler the first time.

        The input handler stores the value in ``inputs``. Returns None with a
        warning if no handler is registered for the input type.
        """
        if parameter in self.inputs:
            return self.inputs[parameter]

        handler = self.registry.lookup(INPUT, self.input_type)
        if handler is None:
            logger.warning(f"unknown input type: {self.input_type}")
            return None

        handler(self, parameter)
        return self.inputs.get(parameter)

    def output(self) -> Any:
        """Return formatted output, generating it with the output handler once.

        The handler returns text, or a callable that performs its own writing
        (see write_output). An empty handler result is kept and not retried.
        Returns None with a warning if no handler is registered for the
        output type; nothing is kept in that case.
        """
        if self._output is not _UNSET:
            return self._output

        handler = self.registry.lookup(OUTPUT, self.output_type)
        if handler is None:
            logger.warning(f"unknown output type: {self.output_type}")
            return None

        self._output = handler(self)
        if not self._output:
            logger.warning("no output received from output handler")
            self._output = None
        return self._output

    def write(self) -> None:
        """Send formatted output to the write handler."""
        if not self.write_type:
            self.write_type = "stdout"

        handler = self.registry.lookup(WRITE, self.write_type)
        if handler is None:
            logger.warning(f"unknown write type: {self.write_type}")
            return

        handler(self)

    def write_output(self) -> None:
        """Write the output, letting callable output do its own writing."""
        output = self.output()

        if callable(output):
            if self.write_type:
                logger.warning(
                    f"output handler writes its own output; "
                    f"write type {self.write_type} ignored"
                )
            output(self.output_filename)
        else:
            self.write()

    def __repr__(self) -> str:
        return (
            f"Query(output_type={self.output_type}, "
            f"write_type={self.write_type}, input_type={self.input_type})"
        )
