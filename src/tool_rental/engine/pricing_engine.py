"""
Pricing Engine - Checkout pricing with traceability.

Pipeline for a single checkout:
- Tool lookup and input validation (fail fast, first error wins)
- Due date and charge-day resolution via the charge calendar
- Pre-discount charge, discount amount and final charge in Decimal
- Immutable RentalAgreement with an execution trace
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from ..config.settings import get_settings, Settings
from ..exceptions import (
    InvalidDiscountPercentError,
    InvalidRentalDaysError,
    InvalidToolCodeError,
)
from .catalog import ToolCatalog, load_catalog
from . import charge_calendar
from .models import RentalAgreement, RentalRequest, Tool, TraceStep
from .money import round2

MIN_RENTAL_DAYS = 1
MIN_DISCOUNT_PERCENT = 0
MAX_DISCOUNT_PERCENT = 100


class PricingEngine:
    """
    Core pricing engine that resolves a checkout into a rental agreement.

    Resolution order:
    1. Look up the tool code in the catalog
    2. Validate rental days, then discount percent
    3. Count charge days between checkout and due date
    4. Price: daily charge × charge days, discount, final charge
    """

    def __init__(self, catalog: Optional[ToolCatalog] = None, settings: Optional[Settings] = None):
        """Initialize engine with the tool catalog."""
        self.settings = settings or get_settings()
        self.catalog = catalog if catalog is not None else load_catalog(self.settings)

    def reload_data(self):
        """Reload the catalog from disk."""
        self.catalog = load_catalog(self.settings)

    def get_tool(self, tool_code: str) -> Tool:
        """
        Resolve a tool code.

        Raises:
            InvalidToolCodeError: code is not in the catalog
        """
        tool = self.catalog.get(tool_code)
        if tool is None:
            raise InvalidToolCodeError(tool_code)
        return tool

    def validate(self, tool_code: str, rental_days: int, discount_percent: int) -> Tool:
        """Validate checkout inputs in a fixed order and return the resolved tool."""
        tool = self.get_tool(tool_code)

        if rental_days < MIN_RENTAL_DAYS:
            raise InvalidRentalDaysError()

        if discount_percent < MIN_DISCOUNT_PERCENT or discount_percent > MAX_DISCOUNT_PERCENT:
            raise InvalidDiscountPercentError()

        return tool

    def calculate_charge_days(self, tool: Tool, rental_days: int, checkout_date: date) -> int:
        """Charge days for a tool rented from checkout_date for rental_days."""
        return charge_calendar.charge_days(tool, rental_days, checkout_date)

    def calculate_pre_discount_charge(self, tool: Tool, charge_days: int) -> Decimal:
        """Daily charge × charge days, unrounded."""
        return tool.daily_charge * charge_days

    def calculate_discount_amount(self, pre_discount_charge: Decimal, discount_percent: int) -> Decimal:
        """Discount on the pre-discount charge, rounded half-up to cents."""
        multiplier = Decimal(discount_percent) / Decimal(100)
        return round2(pre_discount_charge * multiplier)

    def calculate_final_charge(self, pre_discount_charge: Decimal, discount_amount: Decimal) -> Decimal:
        """Pre-discount charge less the discount, rounded half-up to cents."""
        return round2(pre_discount_charge - discount_amount)

    def checkout_request(self, request: RentalRequest) -> RentalAgreement:
        """Checkout from a RentalRequest dataclass."""
        return self.checkout(
            tool_code=request.tool_code,
            rental_days=request.rental_days,
            discount_percent=request.discount_percent,
            checkout_date=request.checkout_date,
        )

    def checkout(
        self,
        tool_code: str,
        rental_days: int,
        discount_percent: int,
        checkout_date: date
    ) -> RentalAgreement:
        """
        Check out a tool and build its rental agreement.

        Args:
            tool_code: Catalog code, case-sensitive (e.g. "JAKR")
            rental_days: Number of days rented, 1 or more
            discount_percent: Whole percent, 0 through 100
            checkout_date: Date the tool leaves the counter

        Returns:
            RentalAgreement with charges and trace

        Raises:
            InvalidToolCodeError, InvalidRentalDaysError, InvalidDiscountPercentError,
            InvalidDateRangeError (due date past the last representable date)
        """
        tool = self.validate(tool_code, rental_days, discount_percent)
        trace = [TraceStep("Tool Lookup", f"{tool.type} ({tool.brand})", tool_code)]

        breakdown = charge_calendar.charge_day_breakdown(tool, rental_days, checkout_date)
        due_date = breakdown.due_date
        trace.append(TraceStep("Due Date", f"{checkout_date} + {rental_days} days", due_date.isoformat()))

        if tool.weekend_charge:
            trace.append(TraceStep("Weekends", "Tool charges on weekends"))
        else:
            trace.append(TraceStep("Weekends", "Weekend days excluded", str(breakdown.weekend_days)))
        if tool.holiday_charge:
            trace.append(TraceStep("Holidays", "Tool charges on holidays"))
        else:
            trace.append(TraceStep("Holidays", "Holiday days excluded", str(breakdown.holiday_days)))

        charge_days = breakdown.charge_days
        trace.append(TraceStep("Charge Days", f"{rental_days} rental days less exclusions", str(charge_days)))

        pre_discount_charge = self.calculate_pre_discount_charge(tool, charge_days)
        trace.append(TraceStep(
            "Pre-Discount",
            f"{charge_days} × ${round2(tool.daily_charge)}",
            f"${round2(pre_discount_charge)}"
        ))

        discount_amount = self.calculate_discount_amount(pre_discount_charge, discount_percent)
        trace.append(TraceStep("Discount", f"{discount_percent}% of pre-discount charge", f"${discount_amount}"))

        final_charge = self.calculate_final_charge(pre_discount_charge, discount_amount)
        trace.append(TraceStep("Final Charge", "Pre-discount less discount", f"${final_charge}"))

        return RentalAgreement(
            tool_code=tool_code,
            tool_type=tool.type,
            tool_brand=tool.brand,
            rental_days=rental_days,
            checkout_date=checkout_date,
            due_date=due_date,
            charge_days=charge_days,
            daily_rental_charge=tool.daily_charge,
            pre_discount_charge=pre_discount_charge,
            discount_percent=discount_percent,
            discount_amount=discount_amount,
            final_charge=final_charge,
            trace=tuple(trace),
        )
