"""Tests for month grid construction."""

from datetime import date, datetime

import pytest

from koyomi.errors import InvalidMonthError
from koyomi.grid import build_month_grid, build_month_grid_for, column_of, weekday_headers
from koyomi.models import PaddingDay, RealDay, Weekday, YearMonth


def test_leap_february_grid():
    """February 2024 (29 days, starts on Thursday) fills five weeks."""
    grid = build_month_grid(2024, 2, today=date(2024, 2, 15))

    assert len(grid) == 35
    assert len(grid.real_days) == 29
    # Thursday is the 4th column with weeks starting Monday
    assert all(isinstance(cell, PaddingDay) for cell in grid.cells[:3])
    assert grid.cells[3] == RealDay(index=3, date=date(2024, 2, 1), is_today=False)
    assert grid.real_days[-1].date == date(2024, 2, 29)
    assert all(isinstance(cell, PaddingDay) for cell in grid.cells[-3:])


def test_today_flag():
    """Only the cell for today is flagged."""
    grid = build_month_grid(2024, 2, today=date(2024, 2, 15))

    flagged = [cell for cell in grid.real_days if cell.is_today]
    assert len(flagged) == 1
    assert flagged[0].date == date(2024, 2, 15)
    assert grid.today_cell == flagged[0]


def test_today_outside_month():
    """No cell is flagged when today is in another month."""
    grid = build_month_grid(2024, 3, today=date(2024, 2, 15))

    assert grid.today_cell is None
    assert not any(cell.is_today for cell in grid.real_days)


def test_today_as_datetime():
    """A datetime today is compared at day granularity."""
    grid = build_month_grid(2024, 2, today=datetime(2024, 2, 15, 23, 59))

    assert grid.today_cell is not None
    assert grid.today_cell.date == date(2024, 2, 15)


def test_month_starting_monday_needs_no_padding():
    """February 2021 starts on Monday and ends on Sunday: exactly four weeks."""
    grid = build_month_grid(2021, 2, today=date(2021, 3, 1))

    assert len(grid) == 28
    assert not any(isinstance(cell, PaddingDay) for cell in grid)


def test_six_week_month():
    """September 2024 starts on Sunday and ends on Monday: six weeks."""
    grid = build_month_grid(2024, 9, today=date(2024, 9, 1))

    assert len(grid) == 42
    assert len(grid.weeks) == 6
    assert grid.weeks[0][6].date == date(2024, 9, 1)
    assert grid.weeks[5][0].date == date(2024, 9, 30)


@pytest.mark.parametrize(
    ("year", "month", "days", "length"),
    [
        (1900, 1, 31, 35),
        (1900, 2, 28, 35),  # century, not a leap year
        (2000, 2, 29, 35),  # divisible by 400, leap year
        (2023, 2, 28, 35),
        (2024, 4, 30, 35),
    ],
)
def test_day_counts(year, month, days, length):
    """Day counts follow the Gregorian calendar, including century years."""
    grid = build_month_grid(year, month, today=date(2024, 1, 1))

    assert len(grid.real_days) == days
    assert len(grid) == length


@pytest.mark.parametrize("week_start", [Weekday.MONDAY, Weekday.SUNDAY])
def test_whole_weeks_and_alignment(week_start):
    """Every month of two centuries is whole weeks with days in their columns."""
    today = date(2024, 2, 15)
    for year in range(1900, 2101):
        for month in range(1, 13):
            grid = build_month_grid(year, month, today, week_start=week_start)
            assert len(grid) % 7 == 0

            first, last = grid.real_days[0], grid.real_days[-1]
            assert first.index % 7 == column_of(first.date, week_start)
            assert last.index % 7 == column_of(last.date, week_start)
            if week_start == Weekday.SUNDAY:
                assert first.index % 7 == first.date.isoweekday() % 7
            else:
                assert first.index % 7 == first.date.weekday()
            assert all(cell.date.month == month for cell in grid.real_days)


def test_indices_are_sequential():
    """Cell indices are unique grid positions, padding included."""
    grid = build_month_grid(2024, 2, today=date(2024, 2, 15))

    assert [cell.index for cell in grid] == list(range(len(grid)))


def test_sunday_start():
    """Weeks can start on Sunday."""
    grid = build_month_grid(2024, 2, today=date(2024, 2, 15), week_start=Weekday.SUNDAY)

    assert len(grid) == 35
    # Thursday is the 5th column with weeks starting Sunday
    assert grid.cells[4].date == date(2024, 2, 1)
    assert all(isinstance(cell, PaddingDay) for cell in grid.cells[:4])
    assert grid.weeks[0][0] == PaddingDay(index=0)
    assert grid.week_start == Weekday.SUNDAY


def test_unsupported_week_start():
    """Only Monday and Sunday are valid week starts."""
    with pytest.raises(ValueError, match="Monday or Sunday"):
        build_month_grid(2024, 2, today=date(2024, 2, 15), week_start=Weekday.WEDNESDAY)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month(month):
    """Months outside 1-12 raise instead of returning an empty grid."""
    with pytest.raises(InvalidMonthError) as exc_info:
        build_month_grid(2024, month, today=date(2024, 2, 15))

    assert exc_info.value.month == month
    assert exc_info.value.year == 2024


def test_idempotent():
    """Same inputs always yield the same grid."""
    first = build_month_grid(2024, 5, today=date(2024, 5, 4))
    second = build_month_grid(2024, 5, today=date(2024, 5, 4))

    assert first == second


def test_build_for_any_day_of_month():
    """Any day of the month (or a YearMonth) selects the whole month."""
    today = date(2024, 2, 15)
    expected = build_month_grid(2024, 2, today)

    assert build_month_grid_for(date(2024, 2, 29), today) == expected
    assert build_month_grid_for(YearMonth(2024, 2), today) == expected


def test_weekday_headers():
    """Headers rotate with the week start."""
    assert weekday_headers() == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert weekday_headers(Weekday.SUNDAY) == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def test_column_of():
    """Columns are 0-based positions from the week start."""
    assert column_of(date(2024, 2, 1)) == 3  # Thursday
    assert column_of(date(2024, 2, 4)) == 6  # Sunday
    assert column_of(date(2024, 2, 4), Weekday.SUNDAY) == 0
