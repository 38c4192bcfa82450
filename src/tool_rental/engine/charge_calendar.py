"""
Charge Calendar - Weekend and US holiday rules for charge-day counting.

Day counting walks the rental window one calendar day at a time. The window
is inclusive at both ends: a 5 day rental checked out on the 3rd covers the
3rd through the 8th.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from ..exceptions import InvalidDateRangeError
from .models import Tool

SATURDAY = 5
SUNDAY = 6
MONDAY = 0

JULY = 7
SEPTEMBER = 9


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start through end, inclusive."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def independence_day_observed(year: int) -> date:
    """
    Observed Independence Day for a year.

    July 4th on a Saturday is observed the Friday before, on a Sunday the
    Monday after.
    """
    independence_day = date(year, JULY, 4)
    if independence_day.weekday() == SATURDAY:
        return independence_day - timedelta(days=1)
    if independence_day.weekday() == SUNDAY:
        return independence_day + timedelta(days=1)
    return independence_day


def is_labor_day(day: date) -> bool:
    """
    Labor Day check: a Monday in September after the first of the month.

    Every September Monday past the 1st passes this check, not only the
    first one.
    """
    return (
        day.month == SEPTEMBER
        and day.weekday() == MONDAY
        and day.replace(day=1) < day
    )


def is_holiday(day: date) -> bool:
    """Check if a date is an observed US holiday (Independence Day or Labor Day)."""
    return day == independence_day_observed(day.year) or is_labor_day(day)


def holidays_for_year(year: int) -> list[date]:
    """List every date in a year that is_holiday() treats as a holiday."""
    holidays = [independence_day_observed(year)]
    holidays.extend(
        d for d in iter_dates(date(year, SEPTEMBER, 1), date(year, SEPTEMBER, 30))
        if is_labor_day(d)
    )
    return sorted(holidays)


def weekend_days_in_range(start: date, end: date) -> int:
    """Count Saturdays and Sundays from start through end, inclusive."""
    return sum(1 for d in iter_dates(start, end) if is_weekend(d))


def holidays_in_range(start: date, end: date) -> int:
    """
    Count observed holidays from start through end, inclusive.

    Raises:
        InvalidDateRangeError: if start is after end
    """
    if start > end:
        raise InvalidDateRangeError()
    return sum(1 for d in iter_dates(start, end) if is_holiday(d))


def count_excluded_days(tool: Tool, start: date, end: date) -> tuple[int, int]:
    """
    Count the weekend and holiday days a tool is not charged for.

    Returns (weekend_days, holiday_days). A count is zero when the tool
    charges for that kind of day. A date that is both a weekend day and a
    holiday lands in both counts. The weekday flag is never consulted.
    """
    weekend_days = 0 if tool.weekend_charge else weekend_days_in_range(start, end)
    holiday_days = 0 if tool.holiday_charge else holidays_in_range(start, end)
    return weekend_days, holiday_days


def due_date_for(checkout_date: date, rental_days: int) -> date:
    """
    Checkout date plus rental days.

    Raises:
        InvalidDateRangeError: if the due date falls past date.max
    """
    try:
        return checkout_date + timedelta(days=rental_days)
    except OverflowError as e:
        raise InvalidDateRangeError(
            f"Rental of {rental_days} days from {checkout_date} ends past {date.max}"
        ) from e


@dataclass(frozen=True)
class ChargeDayBreakdown:
    """Due date and day counts behind a rental's charge days."""
    due_date: date
    weekend_days: int
    holiday_days: int
    charge_days: int


def charge_day_breakdown(tool: Tool, rental_days: int, checkout_date: date) -> ChargeDayBreakdown:
    """
    Resolve the due date and billable days for a rental.

    Charge days are rental days minus the excluded weekend and holiday days
    found between checkout and due date (inclusive). The window holds one
    more date than the rental, so a short weekend rental can come out
    negative.
    """
    due_date = due_date_for(checkout_date, rental_days)
    weekend_days, holiday_days = count_excluded_days(tool, checkout_date, due_date)
    return ChargeDayBreakdown(
        due_date=due_date,
        weekend_days=weekend_days,
        holiday_days=holiday_days,
        charge_days=rental_days - weekend_days - holiday_days,
    )


def charge_days(tool: Tool, rental_days: int, checkout_date: date) -> int:
    """Number of billable days for a rental."""
    return charge_day_breakdown(tool, rental_days, checkout_date).charge_days
