#!/usr/bin/env python3
"""Initialize a DuckDB database with the drinks sample data."""

import duckdb
from pathlib import Path


def init_duckdb(db_path: str = "drinks.duckdb"):
    """Initialize DuckDB database with sample data.

    Args:
        db_path: Path to DuckDB database file
    """
    db_file = Path(db_path)
    db_file.parent.mkdir(parents=True, exist_ok=True)

    conn = duckdb.connect(str(db_file))

    print(f"Initializing DuckDB at {db_path}...")

    conn.execute("""
        CREATE TABLE IF NOT EXISTS drinks (
            drink_id INTEGER PRIMARY KEY,
            name VARCHAR NOT NULL,
            abv DOUBLE
        )
    """)

    conn.execute("""
        CREATE TABLE IF NOT EXISTS ingredients (
            drink_id INTEGER,
            liquor VARCHAR NOT NULL
        )
    """)

    conn.execute("DELETE FROM ingredients")
    conn.execute("DELETE FROM drinks")

    conn.execute("""
        INSERT INTO drinks VALUES
        (1, 'Daiquiri', 20.0),
        (2, 'Martini', 30.0),
        (3, 'Mojito', 13.0),
        (4, 'Zombie', 35.0),
        (5, 'Negroni', 24.0)
    """)

    conn.execute("""
        INSERT INTO ingredients VALUES
        (1, 'rum'),
        (2, 'gin'),
        (3, 'rum'),
        (4, 'rum'),
        (5, 'gin')
    """)

    count = conn.execute("SELECT COUNT(*) FROM drinks").fetchone()[0]
    print(f"  Created drinks table with {count} rows")

    conn.close()
    print("DuckDB initialization complete!")


if __name__ == "__main__":
    import sys

    db_path = sys.argv[1] if len(sys.argv) > 1 else "drinks.duckdb"
    init_duckdb(db_path)
