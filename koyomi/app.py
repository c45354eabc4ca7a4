"""Main Textual application."""

from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import DataTable, Footer, Header

from koyomi.config import Config
from koyomi.grid import build_month_grid
from koyomi.holidays import holiday_name, holidays_in_month
from koyomi.models import MonthGrid, RealDay, YearMonth
from koyomi.widgets import DayDialog, HolidayPanel, MonthTable


class KoyomiApp(App):
    """Koyomi TUI application."""

    CSS = """
    #main-container {
        height: 100%;
    }

    Horizontal {
        height: 100%;
    }

    #month-table {
        width: 3fr;
        height: 100%;
        border: solid $primary;
    }

    #holiday-panel {
        width: 2fr;
        height: 100%;
        padding: 1;
        background: $panel;
        border: solid $primary;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("q", "quit", "Quit"),
        ("c", "current_month", "Current Month"),
        ("n", "next_month", "Next Month"),
        ("b", "prev_month", "Prev Month"),
        ("?", "help", "Help"),
    ]

    def __init__(self, config: Config | None = None, start: YearMonth | None = None) -> None:
        super().__init__()
        self.config = config or Config()
        self.today = self.config.resolve_today()
        self.year_month = start or YearMonth.from_date(self.today)

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header(show_clock=True)
        with Container(id="main-container"), Horizontal():
            yield MonthTable(id="month-table")
            yield HolidayPanel(id="holiday-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Show the starting month."""
        self.show_month(self.year_month)

    def build_grid(self, year_month: YearMonth) -> MonthGrid:
        """Grid for a month, annotated with holiday names."""
        grid = build_month_grid(
            year_month.year, year_month.month, self.today, self.config.week_start
        )
        return grid.with_holiday_names(holiday_name)

    def show_month(self, year_month: YearMonth) -> None:
        """Rebuild and display the given month."""
        self.year_month = year_month
        self.title = f"Koyomi - {year_month.year}/{year_month.month:02d}"

        month_table = self.query_one("#month-table", MonthTable)
        month_table.load_grid(self.build_grid(year_month))
        month_table.focus()

        holiday_panel = self.query_one("#holiday-panel", HolidayPanel)
        holiday_panel.update_holidays(holidays_in_month(year_month.year, year_month.month))

    def shift_month(self, offset: int) -> None:
        """Move the display by ``offset`` months, warning at the calendar limits."""
        try:
            target = self.year_month.shift(offset)
        except ValueError as e:
            self.notify(str(e), severity="warning")
            return
        self.show_month(target)

    def action_next_month(self) -> None:
        """Navigate to next month."""
        self.shift_month(1)

    def action_prev_month(self) -> None:
        """Navigate to previous month."""
        self.shift_month(-1)

    def action_current_month(self) -> None:
        """Navigate to the month containing today."""
        self.show_month(YearMonth.from_date(self.today))

    def on_data_table_cell_selected(self, event: DataTable.CellSelected) -> None:
        """Open the detail dialog for the selected day."""
        month_table = self.query_one("#month-table", MonthTable)
        cell = month_table.cell_at(event.coordinate.row, event.coordinate.column)
        if not isinstance(cell, RealDay):
            return
        self.push_screen(DayDialog(cell))

    def action_help(self) -> None:
        """Show help message."""
        help_text = """
        [bold]Koyomi - Keyboard Shortcuts[/bold]

        [cyan]n[/cyan] - Next month
        [cyan]b[/cyan] - Previous month
        [cyan]c[/cyan] - Current month
        [cyan]enter[/cyan] - Day details
        [cyan]q[/cyan] - Quit application
        [cyan]?[/cyan] - Show this help

        [bold]Colours:[/bold]
        • Yellow - today
        • Red - Sunday or holiday (* marks a named holiday)
        • Blue - Saturday
        """
        self.notify(help_text, title="Help", timeout=10)
