"""Dining Hub database management CLI.

Creates or drops the SQL schema of the dining domain. Only acts on SQL
providers; the in-memory provider needs no schema.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db
    PROTEAN_ENV=production python src/manage.py drop-db
"""

import argparse
import sys


def setup_database():
    from dining.domain import dining
    from dining.utils.db import setup_db

    print("Initializing dining domain...")
    dining.init()
    print("Creating dining database schema...")
    setup_db(dining)
    print("Done.")


def drop_database():
    from dining.domain import dining
    from dining.utils.db import drop_db

    print("Initializing dining domain...")
    dining.init()
    print("Dropping dining database schema...")
    drop_db(dining)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Dining Hub database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
