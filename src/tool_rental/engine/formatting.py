"""Agreement formatting for the counter printout, CLI and UI."""
from datetime import date
from decimal import Decimal
from typing import Optional

from ..config.settings import get_settings, Settings
from .models import RentalAgreement
from .money import round2


def format_money(amount: Decimal, symbol: str = '$') -> str:
    """Format a money amount as currency, e.g. $1,234.56, rounding half-up to cents."""
    rounded = round2(amount)
    sign = '-' if rounded < 0 else ''
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def format_date(value: date, date_format: str = '%m/%d/%y') -> str:
    return value.strftime(date_format)


def format_agreement(agreement: RentalAgreement, settings: Optional[Settings] = None) -> list[str]:
    """
    Render an agreement as labelled lines, one field per line.

    Dates use the configured format (MM/DD/YY by default) and money fields the
    configured currency symbol.
    """
    settings = settings or get_settings()
    symbol = settings.currency_symbol
    date_format = settings.date_format

    return [
        f"Tool code: {agreement.tool_code}",
        f"Tool type: {agreement.tool_type}",
        f"Tool brand: {agreement.tool_brand}",
        f"Rental days: {agreement.rental_days}",
        f"Checkout date: {format_date(agreement.checkout_date, date_format)}",
        f"Due date: {format_date(agreement.due_date, date_format)}",
        f"Charge days: {agreement.charge_days}",
        f"Daily rental charge: {format_money(agreement.daily_rental_charge, symbol)}",
        f"Pre-discount charge: {format_money(agreement.pre_discount_charge, symbol)}",
        f"Discount percent: {agreement.discount_percent}%",
        f"Discount amount: {format_money(agreement.discount_amount, symbol)}",
        f"Final charge: {format_money(agreement.final_charge, symbol)}",
    ]


def print_agreement(agreement: RentalAgreement, settings: Optional[Settings] = None):
    """Print the agreement to stdout."""
    for line in format_agreement(agreement, settings):
        print(line)
