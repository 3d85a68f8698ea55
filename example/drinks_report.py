"""Example: strong rum drinks as an HTML report.

Run scripts/init_duckdb.py first to create drinks.duckdb.
"""

from querylet import Query
from querylet.datasources.duckdb import DuckDBDataSource
from querylet.utils.logging import setup_logging

QUERY = """
SELECT d.name, d.abv
FROM   drinks d
WHERE  d.abv > {{ min_abv }}
  AND  ? IN (SELECT liquor FROM ingredients i WHERE i.drink_id = d.drink_id)
ORDER BY d.name
"""


def main():
    setup_logging(level="INFO")

    with DuckDBDataSource("drinks", {"path": "drinks.duckdb"}) as datasource:
        query = Query()
        query.set_dbh(datasource)
        query.set_query(QUERY)
        query.set_query_vars({"min_abv": 15})
        query.bind("rum")
        query.set_headers({"name": "Drink", "abv": "ABV"})

        query.output_type = "html"
        query.output_filename = "drinks.html"
        query.write_output()

        print(f"{len(query.results())} drinks written to {query.output_filename}")


if __name__ == "__main__":
    main()
