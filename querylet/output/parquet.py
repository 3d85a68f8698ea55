"""Parquet output provider.

Parquet is binary, so instead of returning text the handler returns a
callable that Query.write_output invokes with the output filename.
"""

import logging

import pyarrow as pa
import pyarrow.parquet as pq

from ..handlers.base import OutputHandler
from ..query import QueryError

logger = logging.getLogger(__name__)


def build_table(query) -> pa.Table:
    """Build an Arrow table from the query results in column order."""
    columns = query.columns()
    data = {}
    for column in columns:
        data[column] = []
    for row in query.results():
        for column in columns:
            data[column].append(row.get(column))
    return pa.table(data)


def as_parquet(query):
    """Return a writer that stores the results as a Parquet file."""

    def write_parquet(filename):
        if not filename:
            raise QueryError("parquet output requires an output filename")
        table = build_table(query)
        pq.write_table(table, filename)
        logger.info(f"Wrote {table.num_rows} rows to {filename}")

    return write_parquet


class ParquetOutput(OutputHandler):
    def default_type(self) -> str:
        return "parquet"

    def handler(self):
        return as_parquet
