"""Parse search terms from the command line.

Example:
    python -m src.search.cli --catalog users.json --term id "=100;200" --term author.name ">John"

Prints one JSON object per parsed term. Rejected input exits with status 2.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from src.app import create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.search.parser import SearchParserError
from src.search.schema import load_catalog

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for parsing search terms against a column catalog."""

    parser = argparse.ArgumentParser(description="Parse search query parameters into terms.")
    parser.add_argument("--catalog", required=True, help="Path to the column catalog JSON file.")
    parser.add_argument(
        "--term",
        nargs=2,
        action="append",
        required=True,
        metavar=("COLUMN", "ARGUMENT"),
        help="Column and raw argument, e.g. --term age '>=18'. May be repeated.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL.")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    app = create_app(load_settings())

    try:
        catalog = load_catalog(args.catalog)
    except (OSError, ValidationError) as exc:
        print(f"error: invalid catalog {args.catalog}: {exc}", file=sys.stderr)
        return 2

    try:
        terms = app.parse_all(catalog, [(column, argument) for column, argument in args.term])
    except SearchParserError as exc:
        logger.info("unsupported reason=%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for term in terms:
        print(term.model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
