"""Command-line entrypoint for front-office order ingestion."""
from __future__ import annotations

import argparse
import sys
from decimal import Decimal
from pathlib import Path

from order_ingest.application.use_cases import CreateOrdersUseCase
from order_ingest.config import get_settings, parse_log_level
from order_ingest.errors import ConfigError, InputReadError
from order_ingest.logging_config import configure_logging
from order_ingest.presentation.order_report import export_orders, orders_to_dataframe, render_errors

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate front-office CSV and build orders per account")
    parser.add_argument("source", type=str, help="Path to front-office CSV file")
    parser.add_argument("--export", type=Path, help="Write order lines to a .csv or .xlsx file")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (defaults to ORDER_INGEST_LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        settings = get_settings()
        configure_logging(parse_log_level(args.log_level or settings.log_level))
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        result = CreateOrdersUseCase().execute_path(args.source)
    except InputReadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if not result.is_valid:
        print(f"Rejected {args.source}: {len(result.errors)} problems found")
        print(render_errors(result.errors))
        return EXIT_INVALID

    orders = result.value or []
    print("Ingestion Summary")
    print("=================")
    print(f"Orders: {len(orders)}")
    print(f"Line items: {sum(len(order.items) for order in orders)}")
    total = sum((order.total_amount() for order in orders), Decimal("0"))
    print(f"Total amount: {total:f}")
    if orders:
        print()
        print(orders_to_dataframe(orders).to_string(index=False))
    if args.export is not None:
        try:
            export_orders(orders, args.export)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_ERROR
        print(f"\nExported to {args.export}")
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
