"""Data models for the month grid."""

from calendar import monthrange
from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from datetime import MAXYEAR, MINYEAR, date
from enum import IntEnum

from koyomi.errors import InvalidMonthError


class Weekday(IntEnum):
    """Day of the week, numbered like ``date.isoweekday()``."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12 or not MINYEAR <= self.year <= MAXYEAR:
            raise InvalidMonthError(self.year, self.month)

    @classmethod
    def from_date(cls, target_date: date) -> "YearMonth":
        """Return the month containing a date (the day of month is dropped)."""
        return cls(target_date.year, target_date.month)

    @classmethod
    def parse(cls, text: str) -> "YearMonth":
        """Parse a month string like '2024-02'."""
        year_str, sep, month_str = text.strip().partition("-")
        if not sep:
            msg = f"Expected YYYY-MM, got {text!r}"
            raise ValueError(msg)
        return cls(int(year_str), int(month_str))

    @property
    def first_day(self) -> date:
        """First calendar day of the month."""
        return date(self.year, self.month, 1)

    @property
    def days_in_month(self) -> int:
        """Number of days in the month (leap years included)."""
        return monthrange(self.year, self.month)[1]

    def shift(self, offset: int) -> "YearMonth":
        """Return the month ``offset`` months later (earlier if negative)."""
        index = self.year * 12 + (self.month - 1) + offset
        return YearMonth(index // 12, index % 12 + 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class RealDay:
    """A grid cell holding a day of the displayed month."""

    index: int
    date: date
    is_today: bool
    holiday_name: str | None = None

    @property
    def weekday(self) -> Weekday:
        """ISO weekday of the day."""
        return Weekday(self.date.isoweekday())


@dataclass(frozen=True)
class PaddingDay:
    """An empty grid cell before the first or after the last day."""

    index: int


DayCell = RealDay | PaddingDay


@dataclass(frozen=True)
class MonthGrid:
    """Whole weeks of cells for one month, padded at both ends."""

    year: int
    month: int
    week_start: Weekday
    cells: tuple[DayCell, ...]

    def __len__(self) -> int:
        """Number of cells, padding included."""
        return len(self.cells)

    def __iter__(self) -> Iterator[DayCell]:
        """Iterate over the cells in grid order."""
        return iter(self.cells)

    @property
    def year_month(self) -> YearMonth:
        """The month this grid shows."""
        return YearMonth(self.year, self.month)

    @property
    def weeks(self) -> list[tuple[DayCell, ...]]:
        """Cells split into rows of seven."""
        return [self.cells[i : i + 7] for i in range(0, len(self.cells), 7)]

    @property
    def real_days(self) -> list[RealDay]:
        """Non-padding cells in date order."""
        return [cell for cell in self.cells if isinstance(cell, RealDay)]

    @property
    def today_cell(self) -> RealDay | None:
        """The cell flagged as today, if today falls inside this month."""
        return next((cell for cell in self.real_days if cell.is_today), None)

    def cell_for(self, target_date: date) -> RealDay | None:
        """Find the cell for a date, or None if it is outside the month."""
        return next((cell for cell in self.real_days if cell.date == target_date), None)

    def with_holiday_names(self, lookup: Callable[[date], str | None]) -> "MonthGrid":
        """
        Return a copy whose real days carry ``lookup(date)`` as holiday name.

        The grid itself is left untouched.
        """
        cells = tuple(
            replace(cell, holiday_name=lookup(cell.date)) if isinstance(cell, RealDay) else cell
            for cell in self.cells
        )
        return replace(self, cells=cells)
