# src/inkpost/scripts/init_db.py
"""Create (or recreate) all tables without going through Alembic.

Handy for local SQLite databases; production deployments use ``migrate``.
"""
from __future__ import annotations

import argparse

from inkpost.db.session import create_tables, drop_tables


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args(argv)

    if args.drop:
        drop_tables()
        print("Dropped all tables.")
    create_tables()
    print("Database initialized.")


if __name__ == "__main__":
    main()
