"""
Japanese holiday calendar.

Holidays are decided by a single ordered list of rules (``RULES``); the first
rule that settles a date wins, either with a name or with ``NOT_A_HOLIDAY``.
``is_holiday`` is derived from ``holiday_name``, plus every Sunday, which
counts as a holiday without carrying a name.

The rule set is the widget's own approximation of the national calendar:
substitute holidays are three literal cases and the equinox days are fixed
(see ``equinox_day``), so results differ from the official calendar in some
years.
"""

import logging
from collections.abc import Callable
from datetime import date, timedelta
from typing import NamedTuple

from koyomi.errors import CalendarDecompositionError
from koyomi.models import Weekday, YearMonth

logger = logging.getLogger(__name__)

SUBSTITUTE_HOLIDAY = "振替休日"
VERNAL_EQUINOX_DAY = "春分の日"
AUTUMNAL_EQUINOX_DAY = "秋分の日"

FIXED_HOLIDAYS: dict[tuple[int, int], str] = {
    (1, 1): "元日",
    (2, 23): "天皇誕生日",
    (4, 29): "昭和の日",
    (5, 3): "憲法記念日",
    (5, 4): "みどりの日",
    (5, 5): "こどもの日",
    (8, 11): "山の日",
    (11, 3): "文化の日",
    (11, 23): "勤労感謝の日",
}

# month -> (nth Monday, name)
HAPPY_MONDAYS: dict[int, tuple[int, str]] = {
    1: (2, "成人の日"),
    7: (3, "海の日"),
    9: (3, "敬老の日"),
    10: (2, "体育の日"),
}

SPRING_EQUINOX_DAY = 20
AUTUMN_EQUINOX_DAY = 23

# Returned by a rule that settles the date as a regular day; later rules are skipped.
NOT_A_HOLIDAY = ""


class DateParts(NamedTuple):
    """Calendar components the rules look at."""

    date: date
    year: int
    month: int
    day: int
    weekday: Weekday


def decompose(target_date: date) -> DateParts:
    """
    Split a date into the components used by the rules.

    Raises:
        CalendarDecompositionError: if ``target_date`` is not a usable date.
    """
    try:
        year, month, day = target_date.year, target_date.month, target_date.day
        return DateParts(
            date=date(year, month, day),
            year=year,
            month=month,
            day=day,
            weekday=Weekday(target_date.isoweekday()),
        )
    except (AttributeError, TypeError, ValueError) as e:
        msg = f"Cannot read calendar components from {target_date!r}"
        raise CalendarDecompositionError(msg) from e


def equinox_day(year: int, spring: bool) -> int:
    """
    Day of month of the equinox holiday.

    Fixed approximation: March 20 and September 23 in every year. The
    official day is gazetted yearly and moves between the 19th-21st (spring)
    and 22nd-24th (autumn).
    """
    return SPRING_EQUINOX_DAY if spring else AUTUMN_EQUINOX_DAY


def _substitute_holiday(parts: DateParts) -> str | None:
    if parts.weekday != Weekday.MONDAY:
        return None
    if (parts.month, parts.day) in ((2, 12), (5, 11)):
        return SUBSTITUTE_HOLIDAY
    if (parts.month, parts.day) == (5, 4):
        # Same-day check against May 3; never true for May 4.
        if date(parts.year, 5, 3) == parts.date:
            return SUBSTITUTE_HOLIDAY
        return NOT_A_HOLIDAY
    return None


def _fixed_holiday(parts: DateParts) -> str | None:
    return FIXED_HOLIDAYS.get((parts.month, parts.day))


def _happy_monday(parts: DateParts) -> str | None:
    if parts.weekday != Weekday.MONDAY:
        return None
    # A Monday is settled here: either a Happy Monday or a regular day.
    if parts.month not in HAPPY_MONDAYS:
        return NOT_A_HOLIDAY
    nth, name = HAPPY_MONDAYS[parts.month]
    if 7 * (nth - 1) < parts.day <= 7 * nth:
        return name
    return NOT_A_HOLIDAY


def _equinox(parts: DateParts) -> str | None:
    if parts.month == 3 and parts.day == equinox_day(parts.year, spring=True):
        return VERNAL_EQUINOX_DAY
    if parts.month == 9 and parts.day == equinox_day(parts.year, spring=False):
        return AUTUMNAL_EQUINOX_DAY
    return None


RULES: tuple[Callable[[DateParts], str | None], ...] = (
    _substitute_holiday,
    _fixed_holiday,
    _happy_monday,
    _equinox,
)


def holiday_name(target_date: date) -> str | None:
    """Get the name of a Japanese holiday, or None if not a holiday."""
    try:
        parts = decompose(target_date)
    except CalendarDecompositionError:
        logger.debug("Treating %r as a regular day", target_date, exc_info=True)
        return None

    for rule in RULES:
        name = rule(parts)
        if name is not None:
            return name or None
    return None


def is_holiday(target_date: date) -> bool:
    """
    Check if a date is a holiday.

    A date is a holiday when:
    - it is a Sunday (no name attached), or
    - ``holiday_name`` returns a name for it
    """
    try:
        parts = decompose(target_date)
    except CalendarDecompositionError:
        logger.debug("Treating %r as a regular day", target_date, exc_info=True)
        return False

    if parts.weekday == Weekday.SUNDAY:
        return True
    return holiday_name(parts.date) is not None


def holidays_in_month(year: int, month: int) -> list[tuple[date, str]]:
    """Return [(date, name), ...] for the named holidays of a month."""
    year_month = YearMonth(year, month)
    result = []
    for offset in range(year_month.days_in_month):
        current = year_month.first_day + timedelta(days=offset)
        name = holiday_name(current)
        if name is not None:
            result.append((current, name))
    return result

