"""
Command-line entry point: run the bookstore query catalog and print results.

    python -m query_runner [--seed] [--json] [--uri URI] [--database DB] [--collection NAME]
"""

import argparse
import json
import sys
from typing import List, Optional

from query_runner import config
from query_runner.errors import OperationError, StoreConnectionError
from query_runner.formatter import format_outcome, format_summary
from query_runner.models import ConnectionConfig
from query_runner.runner import run
from query_runner.seed import seed_collection


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="query-runner",
        description="Run the bookstore query catalog against a MongoDB collection",
    )
    parser.add_argument("--uri", default=config.MONGO_URI, help="MongoDB connection URI")
    parser.add_argument("--database", default=config.DATABASE_NAME, help="Database name")
    parser.add_argument("--collection", default=config.COLLECTION_NAME, help="Collection name")
    parser.add_argument("--seed", action="store_true",
                        help="Drop the collection and insert sample books before running")
    parser.add_argument("--json", action="store_true",
                        help="Print the full run report as JSON at the end")
    return parser


def print_connected() -> None:
    print("Connected to MongoDB")


def print_outcome(outcome) -> None:
    print(format_outcome(outcome))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    connection = ConnectionConfig(
        mongo_uri=args.uri,
        database_name=args.database,
        collection_name=args.collection,
    )

    try:
        if args.seed:
            inserted = seed_collection(connection, on_connect=print_connected)
            print(f"Seeded {inserted} books into {args.database}.{args.collection}")
        # the banner goes out on the first connection of the invocation
        report = run(
            connection,
            reporter=print_outcome,
            on_connect=None if args.seed else print_connected,
        )
    except (StoreConnectionError, OperationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_summary(report))
    if args.json:
        print(json.dumps(report.model_dump(), indent=2, default=str))
    print("Connection closed")
    return 0
