"""Money rounding shared by pricing and display."""
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def round2(amount: Decimal) -> Decimal:
    """Round a money amount to cents, half-up."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
