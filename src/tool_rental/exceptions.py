"""
Custom exception classes for the tool rental pricing system.

Every checkout input error is a ``ValidationError`` so callers (CLI, API, UI)
can catch one type and report the message instead of a traceback.
"""
from typing import Optional


class ValidationError(ValueError):
    """Base class for caller-input errors raised during checkout."""

    default_message = "Error: invalid rental request"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidToolCodeError(ValidationError):
    """Raised when a tool code cannot be found in the catalog."""

    default_message = "Error: invalid tool code"

    def __init__(self, tool_code: Optional[str] = None, message: Optional[str] = None) -> None:
        self.tool_code = tool_code
        if message is None and tool_code is not None:
            message = f"Invalid tool code: {tool_code}"
        super().__init__(message)


class InvalidRentalDaysError(ValidationError):
    """Raised when the rental day count is less than 1."""

    default_message = "Rental days must be 1 or greater"


class InvalidDiscountPercentError(ValidationError):
    """Raised when the discount percent is outside 0-100."""

    default_message = "Discount percent must be between 0 and 100"


class InvalidDateRangeError(ValidationError):
    """Raised when a day-counting range starts after it ends."""

    default_message = "Start date cannot be after end date"


class CatalogError(Exception):
    """Raised when a tool catalog file cannot be loaded."""

    def __init__(self, message: str = "Error: tool catalog could not be loaded") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
