"""Tab-separated output provider."""

from ..handlers.base import OutputHandler


def as_tabbed(query) -> str:
    columns = query.columns()
    lines = ["\t".join(query.header(column) for column in columns)]
    for row in query.results():
        values = []
        for column in columns:
            value = row.get(column)
            values.append("" if value is None else str(value))
        lines.append("\t".join(values))
    return "\n".join(lines) + "\n"


class TabbedOutput(OutputHandler):
    def default_type(self) -> str:
        return "tabbed"

    def handler(self):
        return as_tabbed
