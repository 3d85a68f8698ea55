"""Template output, by default a simple HTML table."""

from ..rendering import render_template, render_template_file

DEFAULT_TEMPLATE = """\
<html>
  <head>
    <title>results of query</title>
  </head>
  <body>
    <table>
      <tr>
      {% for column in query.columns() %}
        <th>{{ query.header(column) }}</th>
      {% endfor %}
      </tr>
      {% for row in query.results() %}
      <tr>{% for column in query.columns() %}<td>{{ row[column] if row[column] is not none else '' }}</td>{% endfor %}</tr>
      {% endfor %}
    </table>
  </body>
</html>
"""


def as_template(query) -> str:
    """Render results through a Jinja2 template.

    Uses the file named by the ``template_file`` option when set, otherwise
    the built-in HTML table. The template sees the query as ``query``.
    """
    template_file = query.option("template_file")
    context = {"query": query}
    if template_file:
        return render_template_file(template_file, context)
    return render_template(DEFAULT_TEMPLATE, context, autoescape=True)
