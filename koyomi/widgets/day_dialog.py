"""Dialog showing the details of a day."""

from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from koyomi.holidays import is_holiday
from koyomi.models import RealDay


class DayDialog(ModalScreen):
    """Modal dialog for a selected day."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("escape", "dismiss", "Close"),
    ]

    CSS = """
    DayDialog {
        align: center middle;
    }

    #dialog {
        width: 44;
        height: auto;
        background: $panel;
        border: thick $primary;
        padding: 1 2;
    }

    #dialog-title {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
        text-style: bold;
    }

    #button-row {
        width: 100%;
        height: auto;
        margin-top: 1;
        align-horizontal: center;
    }
    """

    def __init__(self, cell: RealDay, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cell = cell

    def compose(self) -> ComposeResult:
        """Compose the dialog."""
        with Vertical(id="dialog"):
            yield Static(self.cell.date.strftime("%Y-%m-%d (%a)"), id="dialog-title")
            yield Static(self.describe(self.cell), id="dialog-body")
            with Horizontal(id="button-row"):
                yield Button("Close", id="close-button", variant="primary")

    @staticmethod
    def describe(cell: RealDay) -> str:
        """Body text: holiday status, plus a marker for today."""
        if cell.holiday_name:
            lines = [f"[red]{cell.holiday_name}[/red]"]
        elif is_holiday(cell.date):
            lines = ["[red]Sunday[/red]"]
        else:
            lines = ["No holiday"]
        if cell.is_today:
            lines.append("[bold yellow]Today[/bold yellow]")
        return "\n".join(lines)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "close-button":
            self.dismiss(None)
