"""
Command line checkout.

Usage:
    tool-rental checkout JAKR 5 20 2020-07-03
    tool-rental checkout LADW 3 10 07/02/20 --trace
    tool-rental tools
"""
import argparse
import sys
from datetime import date, datetime
from typing import Optional

from .config.settings import get_settings
from .engine import PricingEngine
from .engine.catalog import ToolCatalog, load_catalog
from .engine.formatting import format_money, print_agreement
from .exceptions import CatalogError, ValidationError

DATE_FORMATS = ('%Y-%m-%d', '%m/%d/%y', '%m/%d/%Y')


def parse_date(value: str) -> date:
    """Parse YYYY-MM-DD, MM/DD/YY or MM/DD/YYYY into a date."""
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"invalid date '{value}' (use YYYY-MM-DD or MM/DD/YY)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='tool-rental', description='Tool rental checkout pricing')
    parser.add_argument('--catalog', help='Path to a tool catalog CSV (defaults to the configured catalog)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    checkout = subparsers.add_parser('checkout', help='Check out a tool and print the rental agreement')
    checkout.add_argument('tool_code', help='Tool code, e.g. JAKR')
    checkout.add_argument('rental_days', type=int, help='Number of rental days (1 or more)')
    checkout.add_argument('discount_percent', type=int, help='Discount percent (0-100)')
    checkout.add_argument('checkout_date', type=parse_date, help='Checkout date (YYYY-MM-DD or MM/DD/YY)')
    checkout.add_argument('--trace', action='store_true', help='Print the calculation trace')

    subparsers.add_parser('tools', help='List the tool catalog')
    return parser


def _load_catalog(path: Optional[str]) -> ToolCatalog:
    if path:
        return ToolCatalog.from_csv(path, verbose=False)
    return load_catalog(get_settings())


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        catalog = _load_catalog(args.catalog)
    except CatalogError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    engine = PricingEngine(catalog=catalog)

    if args.command == 'tools':
        for tool in catalog:
            print(
                f"{tool.code:<6} {tool.type:<12} {tool.brand:<10} {format_money(tool.daily_charge):>8}  "
                f"weekday={'Y' if tool.weekday_charge else 'N'} "
                f"weekend={'Y' if tool.weekend_charge else 'N'} "
                f"holiday={'Y' if tool.holiday_charge else 'N'}"
            )
        return 0

    try:
        agreement = engine.checkout(
            tool_code=args.tool_code,
            rental_days=args.rental_days,
            discount_percent=args.discount_percent,
            checkout_date=args.checkout_date,
        )
    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print_agreement(agreement)
    if args.trace:
        print()
        print(agreement.get_trace_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
