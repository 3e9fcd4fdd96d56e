"""Demonstration entry point: annual revenue statistics report.

Usage:
    python -m annual_revenue                       # sample [0, 0, 5000, 2500, 3250]
    python -m annual_revenue 10 20 30 40 --locale en-US
    python -m annual_revenue 0 0 100 --include-zero-days --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import List, Optional

from annual_revenue.core.domain import DailyRevenueSeries
from annual_revenue.core.math import compute_revenue_statistics
from annual_revenue.reporting import (
    DEFAULT_LOCALE,
    CurrencyFormatConfig,
    UnsupportedLocale,
    render_statistics_report,
)

logger = logging.getLogger(__name__)

SAMPLE_DAILY_REVENUES = ("0", "0", "5000", "2500", "3250")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Annual daily revenue statistics")
    parser.add_argument(
        "amounts",
        nargs="*",
        metavar="AMOUNT",
        help="Daily revenue amounts in day order (default: built-in sample)",
    )
    parser.add_argument("--locale", default=DEFAULT_LOCALE, help="Currency locale, e.g. pt-BR, en-US")
    parser.add_argument("--currency", default=None, help="ISO 4217 currency code (default: from locale)")
    parser.add_argument(
        "--include-zero-days",
        action="store_true",
        help="Treat zero-revenue days like any other day",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        series = DailyRevenueSeries(revenues=args.amounts or SAMPLE_DAILY_REVENUES)
    except ValueError as e:
        # pydantic ValidationError оборачивает InvalidRevenueAmount
        parser.error(f"invalid amount: {e}")

    result = compute_revenue_statistics(
        series, ignore_days_without_revenue=not args.include_zero_days
    )
    logger.info("Computed statistics for %d day(s)", len(series))

    config = CurrencyFormatConfig(locale=args.locale, currency=args.currency)
    try:
        report = render_statistics_report(result, config)
    except UnsupportedLocale as e:
        parser.error(str(e))

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
