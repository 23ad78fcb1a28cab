"""Status bar — bottom bar showing model, character, pending replies and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar with the active model, character and in-flight request count."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    model: reactive[str] = reactive('')
    character: reactive[str] = reactive('')
    pending: reactive[int] = reactive(0)
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        left_parts = [
            f'model {self.model or "—"}',
            f'character {self.character or "—"}',
        ]
        if self.pending:
            noun = 'reply' if self.pending == 1 else 'replies'
            left_parts.append(f'⟳ Waiting for {self.pending} {noun}')
        left = ' │ '.join(left_parts)

        content_width = (self.size.width or 80) - 2
        hints = self.keybinding_hints
        if hints:
            hints_width = cell_len(hints.replace(r'\[', '['))
            gap = content_width - cell_len(left) - hints_width
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
