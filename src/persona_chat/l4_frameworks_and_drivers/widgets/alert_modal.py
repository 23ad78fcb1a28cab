"""Alert modal — blocking notice the user acknowledges with Enter or Escape."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class AlertModal(ModalScreen[None]):
    """Modal screen that shows a single message. Enter, Escape or OK to dismiss."""

    DEFAULT_CSS = """
    AlertModal {
        align: center middle;
    }

    AlertModal > Vertical {
        width: 60;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    AlertModal > Vertical > #alert-body {
        margin-bottom: 1;
    }

    AlertModal > Vertical > #alert-ok {
        width: 100%;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('enter', 'dismiss', 'Close'),
    ]

    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(self.message, id='alert-body', markup=False)
            yield Button('OK', id='alert-ok', variant='primary')

    def on_mount(self) -> None:
        self.query_one('#alert-ok', Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss()
