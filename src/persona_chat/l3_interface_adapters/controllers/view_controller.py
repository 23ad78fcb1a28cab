"""ViewController — which page is active and whether the character modal is open."""

from __future__ import annotations

from persona_chat.l2_use_cases.ports.chat_view import ChatView

CHAT_PAGE = 'chat-page'
SETTINGS_PAGE = 'settings-page'
PAGES = (CHAT_PAGE, SETTINGS_PAGE)


class ViewController:
    """Holds page/modal state and mirrors every change onto the view."""

    def __init__(self, view: ChatView) -> None:
        self._view = view
        self.active_page = CHAT_PAGE
        self.modal_open = False

    def switch_page(self, page_id: str) -> None:
        if page_id not in PAGES:
            raise ValueError(f'Unknown page: {page_id}')
        self.active_page = page_id
        self._view.show_page(page_id)

    def open_modal(self) -> None:
        self.modal_open = True
        self._view.show_modal(True)

    def close_modal(self) -> None:
        if not self.modal_open:
            return
        self.modal_open = not self._view.show_modal(False)
