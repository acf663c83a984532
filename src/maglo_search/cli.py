"""Command-line search over transaction or invoice rows.

Examples:
    maglo-search --entity invoices --search acme
    maglo-search --entity transactions --params "?search=netflix&status=pending" --scores
    maglo-search --entity invoices --data rows.json --status paid --limit 5
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

import orjson
from pydantic import BaseModel

from maglo_search.config import Settings
from maglo_search.domain.model import (
    Invoice,
    Transaction,
    invoices_table,
    load_fixture,
    load_rows,
    transactions_table,
)
from maglo_search.observability import configure_logging, init_tracing
from maglo_search.search.ranking import ScoredRow
from maglo_search.service_layer.search_table import SearchParamNames, SearchTable
from maglo_search.utils.search_params import update_search_params


logger = logging.getLogger(__name__)

ENTITIES: dict[str, type[BaseModel]] = {"transactions": Transaction, "invoices": Invoice}


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maglo-search",
        description="Filter and rank transaction or invoice rows by free-text query",
    )
    parser.add_argument(
        "--entity",
        choices=sorted(ENTITIES),
        default="transactions",
        help="Row shape to search (default: transactions)",
    )
    parser.add_argument(
        "--data",
        type=Path,
        help="JSON array of rows (defaults to the bundled sample data)",
    )
    parser.add_argument("--search", default="", help="Free-text query")
    parser.add_argument("--status", default="", help="Status filter (substring match)")
    parser.add_argument(
        "--params",
        help="URL or query string such as '?search=acme&status=paid'; fills --search/--status when given",
    )
    parser.add_argument("--limit", type=int, help="Maximum rows to print")
    parser.add_argument("--scores", action="store_true", help="Include the ranking score with each row")
    parser.add_argument("--log-level", help="Override MAGLO_SEARCH_LOG_LEVEL")
    parser.add_argument(
        "--json-logs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override MAGLO_SEARCH_LOG_JSON",
    )
    return parser


def _validate_args(args: argparse.Namespace) -> None:
    if args.limit is not None and args.limit < 1:
        raise ValueError("--limit must be >= 1")


def _query_string(args: argparse.Namespace, settings: Settings) -> str:
    if args.params is not None:
        return args.params
    return update_search_params(None, **{settings.search_param: args.search, settings.status_param: args.status})


def _load(args: argparse.Namespace) -> list[BaseModel]:
    if args.data is None:
        return list(load_fixture(args.entity))
    return list(load_rows(args.data, ENTITIES[args.entity]))


def _print_rows(results: Sequence[ScoredRow[BaseModel]], *, with_scores: bool) -> None:
    for item in results:
        payload = item.row.model_dump(mode="json", by_alias=True, exclude_none=True)
        if with_scores:
            payload = {"score": round(item.score, 6), "row": payload}
        sys.stdout.write(orjson.dumps(payload).decode("utf-8") + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    try:
        _validate_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    settings = Settings()
    configure_logging(
        args.log_level or settings.log_level,
        settings.log_json if args.json_logs is None else args.json_logs,
    )
    init_tracing(settings.service_name)

    try:
        rows = _load(args)
    except OSError as exc:
        logger.error("Cannot read row data: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid row data: %s", exc)
        return 1

    names = SearchParamNames(query=settings.search_param, status=settings.status_param)
    factory = transactions_table if args.entity == "transactions" else invoices_table
    table: SearchTable[BaseModel] = SearchTable(factory(names, settings.token_cap()))

    results = table.search_scored(rows, _query_string(args, settings))
    if args.limit is not None:
        results = results[: args.limit]
    _print_rows(results, with_scores=args.scores)
    logger.info("Printed %d %s rows", len(results), args.entity)
    return 0


if __name__ == "__main__":
    sys.exit(main())
