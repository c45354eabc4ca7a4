"""Panel listing the holidays of the displayed month."""

from datetime import date

from textual.widgets import Static


class HolidayPanel(Static):
    """Named holidays of the month, one per line."""

    def update_holidays(self, holidays: list[tuple[date, str]]) -> None:
        """Update the displayed list."""
        self.update(self.format_holidays(holidays))

    @staticmethod
    def format_holidays(holidays: list[tuple[date, str]]) -> str:
        """Rich markup for a holiday list."""
        if not holidays:
            return "[dim]No holidays this month[/dim]"
        lines = ["[bold]Holidays[/bold]"]
        for holiday_date, name in holidays:
            lines.append(f"[red]{holiday_date.strftime('%m/%d (%a)')}[/red] {name}")
        return "\n".join(lines)
