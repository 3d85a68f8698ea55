"""Comma-separated output."""


def _quote(value) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '\\"') + '"'


def as_csv(query) -> str:
    """Format results as CSV.

    The header line holds the column headers unquoted. Every value is
    quoted, missing values become empty strings and embedded double quotes
    are backslash-escaped.
    """
    columns = query.columns()
    lines = [",".join(query.header(column) for column in columns)]
    for row in query.results():
        values = []
        for column in columns:
            values.append(_quote(row.get(column)))
        lines.append(",".join(values))
    return "".join(line + "\n" for line in lines)
