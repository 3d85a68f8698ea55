"""Shared fixtures for querylet tests."""

import pytest

from querylet.builtin_handlers import register_builtin_handlers
from querylet.datasources.base import DataSource, PreparedStatement
from querylet.handlers import CATEGORIES, HandlerRegistry, default_registry


class FakeStatement(PreparedStatement):
    """Statement returning canned rows and recording how it was run."""

    def __init__(self, datasource, sql):
        super().__init__(sql)
        self.datasource = datasource
        self.params = None

    def execute(self, *params):
        self.params = list(params)
        self.datasource.executions.append((self.sql, self.params))

    def column_names(self):
        return list(self.datasource.columns)

    def fetch_rows(self):
        rows = []
        for row in self.datasource.rows:
            rows.append(dict(row))
        return rows


class FakeDataSource(DataSource):
    """In-memory data source that counts executions."""

    def __init__(self, columns=None, rows=None):
        super().__init__("fake", {})
        self.columns = columns or ["id", "name"]
        self.rows = rows if rows is not None else [
            {"id": 1, "name": "Bob"},
            {"id": 2, "name": "Alice"},
        ]
        self.executions = []

    def connect(self):
        self._connected = True

    def disconnect(self):
        self._connected = False

    def prepare(self, sql):
        return FakeStatement(self, sql)


@pytest.fixture
def fake_datasource():
    """Fake data source with two rows of (id, name)."""
    return FakeDataSource()


@pytest.fixture
def registry():
    """Fresh registry holding only the built-in handlers."""
    return register_builtin_handlers(HandlerRegistry())


@pytest.fixture(autouse=True)
def restore_default_registry():
    """Undo registrations tests make on the process-wide registry."""
    saved = {}
    for category in CATEGORIES:
        saved[category] = dict(default_registry._table(category))
    yield
    for category in CATEGORIES:
        table = default_registry._table(category)
        table.clear()
        table.update(saved[category])
