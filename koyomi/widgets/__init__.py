"""Textual widgets for the TUI."""

from koyomi.widgets.day_dialog import DayDialog
from koyomi.widgets.holiday_panel import HolidayPanel
from koyomi.widgets.month_table import MonthTable

__all__ = ["DayDialog", "HolidayPanel", "MonthTable"]
