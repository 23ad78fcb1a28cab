"""Transcript panel — scrolling RichLog of chat entries."""

from __future__ import annotations

import pyperclip
from rich.markup import escape
from textual.binding import Binding
from textual.widgets import RichLog

_LABELS = {
    'user': '[bold cyan]You[/bold cyan]',
    'assistant': '[bold green]AI[/bold green]',
    'error': '[bold red]Error[/bold red]',
}


class TranscriptPanel(RichLog):
    """Auto-scrolling chat transcript. Entries are append-only until cleared."""

    DEFAULT_CSS = """
    TranscriptPanel {
        border: solid $primary;
        scrollbar-size: 1 1;
    }
    TranscriptPanel:focus {
        border: solid $accent;
    }
    """

    BINDINGS = [Binding('c', 'copy_content', 'Copy', show=False)]

    def __init__(self, title: str = 'Chat', **kwargs) -> None:
        super().__init__(highlight=False, markup=True, wrap=True, auto_scroll=True, **kwargs)
        self.border_title = title
        self.entries: list[tuple[str, str]] = []

    def add_entry(self, text: str, sender: str) -> None:
        """Append one labelled entry and keep the newest one in view."""
        self.entries.append((sender, text))
        label = _LABELS.get(sender, escape(sender))
        self.write(f'{label}  {escape(text)}')
        self.write('')
        self.scroll_end(animate=False)

    def clear_entries(self) -> None:
        self.entries.clear()
        self.clear()

    def action_copy_content(self) -> None:
        """Copy the whole conversation to the system clipboard."""
        if not self.entries:
            self.app.notify('Nothing to copy', severity='warning', timeout=2)
            return
        pyperclip.copy('\n\n'.join(f'{sender}: {text}' for sender, text in self.entries))
        self.app.notify('Transcript copied', timeout=2)
