"""Month grid construction: a month as whole weeks of day cells."""

import logging
from datetime import date, datetime, timedelta

from koyomi.models import DayCell, MonthGrid, PaddingDay, RealDay, Weekday, YearMonth

logger = logging.getLogger(__name__)

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
SUPPORTED_WEEK_STARTS = (Weekday.MONDAY, Weekday.SUNDAY)


def _check_week_start(week_start: Weekday) -> Weekday:
    week_start = Weekday(week_start)
    if week_start not in SUPPORTED_WEEK_STARTS:
        msg = f"Weeks must start on Monday or Sunday, not {week_start.name.title()}"
        raise ValueError(msg)
    return week_start


def column_of(target_date: date, week_start: Weekday = Weekday.MONDAY) -> int:
    """Return the 0-based grid column of a date."""
    return (target_date.isoweekday() - week_start) % 7


def weekday_headers(week_start: Weekday = Weekday.MONDAY) -> list[str]:
    """Column headers in grid order."""
    week_start = _check_week_start(week_start)
    offset = week_start - 1
    return DAY_ABBR[offset:] + DAY_ABBR[:offset]


def build_month_grid(
    year: int,
    month: int,
    today: date,
    week_start: Weekday = Weekday.MONDAY,
) -> MonthGrid:
    """
    Build the padded day grid for a month.

    Every day of the month becomes a RealDay, flagged ``is_today`` when it
    equals ``today``. Padding cells are added before the first day so it
    lands under its weekday column, and after the last day to complete the
    final week. The result length is always a multiple of 7.

    Raises:
        InvalidMonthError: if ``month`` is outside 1-12 (or ``year`` outside
            the range ``datetime.date`` supports).
    """
    week_start = _check_week_start(week_start)
    year_month = YearMonth(year, month)
    if isinstance(today, datetime):
        today = today.date()
    first_day = year_month.first_day
    days_in_month = year_month.days_in_month
    last_day = first_day + timedelta(days=days_in_month - 1)

    leading = column_of(first_day, week_start)
    trailing = 6 - column_of(last_day, week_start)

    cells: list[DayCell] = [PaddingDay(index=i) for i in range(leading)]
    for offset in range(days_in_month):
        current = first_day + timedelta(days=offset)
        cells.append(RealDay(index=len(cells), date=current, is_today=current == today))
    cells.extend(PaddingDay(index=len(cells) + i) for i in range(trailing))

    logger.debug(
        "Built grid for %s: %d leading, %d days, %d trailing",
        year_month,
        leading,
        days_in_month,
        trailing,
    )
    return MonthGrid(year=year, month=month, week_start=week_start, cells=tuple(cells))


def build_month_grid_for(
    target: date | YearMonth,
    today: date,
    week_start: Weekday = Weekday.MONDAY,
) -> MonthGrid:
    """Build the grid for the month containing ``target`` (any day of month)."""
    year_month = target if isinstance(target, YearMonth) else YearMonth.from_date(target)
    return build_month_grid(year_month.year, year_month.month, today, week_start)
