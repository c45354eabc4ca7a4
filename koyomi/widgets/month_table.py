"""Month table widget showing the day grid."""

from rich.text import Text
from textual.widgets import DataTable

from koyomi.grid import weekday_headers
from koyomi.holidays import is_holiday
from koyomi.models import DayCell, MonthGrid, PaddingDay, RealDay, Weekday


def cell_style(cell: RealDay) -> str | None:
    """Rich style for a day cell, or None for a plain weekday."""
    if cell.is_today:
        return "bold blue on yellow"
    if cell.holiday_name or is_holiday(cell.date):
        return "red"
    if cell.weekday == Weekday.SATURDAY:
        return "blue"
    return None


class MonthTable(DataTable):
    """Table displaying one month, a row per week."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cursor_type = "cell"
        self.show_cursor = True
        self.can_focus = True
        self.month_grid: MonthGrid | None = None

    def load_grid(self, grid: MonthGrid) -> None:
        """Replace the displayed month."""
        self.clear(columns=True)
        for header in weekday_headers(grid.week_start):
            self.add_column(header, width=6)

        for week_no, week in enumerate(grid.weeks):
            self.add_row(*(self.format_cell(cell) for cell in week), key=f"week-{week_no}")
        self.month_grid = grid

        # Move cursor to today's cell if it is in this month
        today = grid.today_cell
        if today is not None:
            self.move_cursor(row=today.index // 7, column=today.index % 7)

    def cell_at(self, row: int, column: int) -> DayCell | None:
        """Grid cell under a table coordinate."""
        if self.month_grid is None:
            return None
        index = row * 7 + column
        if not 0 <= index < len(self.month_grid.cells):
            return None
        return self.month_grid.cells[index]

    @staticmethod
    def format_cell(cell: DayCell) -> Text | str:
        """Format a cell as day number, marking named holidays."""
        if isinstance(cell, PaddingDay):
            return ""
        label = f"{cell.date.day:>2}"
        if cell.holiday_name:
            label += " *"
        style = cell_style(cell)
        return Text(label, style=style) if style else label
