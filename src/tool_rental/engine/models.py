"""
Data models for the rental pricing engine.

Uses dataclasses for structured, type-safe data representation.
Tools and agreements are frozen; a checkout never mutates either.
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from .money import round2


@dataclass(frozen=True)
class TraceStep:
    """A single step in the checkout calculation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class Tool:
    """A rentable tool and its charge policy."""
    code: str
    type: str
    brand: str
    daily_charge: Decimal
    weekday_charge: bool = True
    weekend_charge: bool = False
    holiday_charge: bool = False


@dataclass
class RentalRequest:
    """A checkout request as entered at the counter."""
    tool_code: str
    rental_days: int
    discount_percent: int
    checkout_date: date


@dataclass(frozen=True)
class RentalAgreement:
    """Complete result of a checkout calculation."""
    tool_code: str
    tool_type: str
    tool_brand: str
    rental_days: int
    checkout_date: date
    due_date: date
    charge_days: int
    daily_rental_charge: Decimal
    pre_discount_charge: Decimal
    discount_percent: int
    discount_amount: Decimal
    final_charge: Decimal
    trace: tuple[TraceStep, ...] = field(default=(), compare=False)

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to a JSON-safe dict (ISO dates, money as half-up 2-place strings)."""
        return {
            "tool_code": self.tool_code,
            "tool_type": self.tool_type,
            "tool_brand": self.tool_brand,
            "rental_days": self.rental_days,
            "checkout_date": self.checkout_date.isoformat(),
            "due_date": self.due_date.isoformat(),
            "charge_days": self.charge_days,
            "daily_rental_charge": str(round2(self.daily_rental_charge)),
            "pre_discount_charge": str(round2(self.pre_discount_charge)),
            "discount_percent": self.discount_percent,
            "discount_amount": str(round2(self.discount_amount)),
            "final_charge": str(round2(self.final_charge)),
        }
