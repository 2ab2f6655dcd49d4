"""
Pagination widget for stepping through fetched users
"""

from typing import Optional

from textual.containers import Container
from textual.widgets import Button, Label
from textual.message import Message


class Pagination(Container):
    """
    Prev / Next buttons around a page indicator.

    The widget never changes pages itself; it asks for a step and waits for
    `update_pages` with the result.
    """

    DEFAULT_CSS = """
    Pagination {
        layout: horizontal;
        height: 3;
        content-align: center middle;
    }

    Pagination > Button {
        min-width: 10;
        margin: 0 1;
    }

    Pagination > #page-indicator {
        min-width: 15;
        height: 3;
        content-align: center middle;
    }
    """

    class Navigate(Message):
        """Request to move `step` pages (-1 or +1)."""
        def __init__(self, step: int) -> None:
            super().__init__()
            self.step = step

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.page_index = 0
        self.total_pages = 0

    def compose(self):
        """Create child widgets"""
        yield Button("< Prev", id="prev-page", classes="page-button")
        yield Label("Page [b]0[/b] of [b]0[/b]", id="page-indicator", classes="page-indicator")
        yield Button("Next >", id="next-page", classes="page-button")

    def on_mount(self) -> None:
        self.update_pages(self.page_index, self.total_pages)

    def update_pages(self, page_index: int, total: int) -> None:
        """
        Show a new position.

        Args:
            page_index: Current page index (0-based)
            total: Total pages, 0 when there is nothing to show
        """
        self.page_index = page_index
        self.total_pages = total

        shown = page_index + 1 if total else 0
        self.query_one("#page-indicator", Label).update(
            f"Page [b]{shown}[/b] of [b]{total}[/b]"
        )

        self.query_one("#prev-page", Button).disabled = page_index <= 0
        self.query_one("#next-page", Button).disabled = page_index >= total - 1

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Translate button presses into navigation requests"""
        button_id = event.button.id
        if button_id == "prev-page":
            event.stop()
            self.post_message(self.Navigate(-1))
        elif button_id == "next-page":
            event.stop()
            self.post_message(self.Navigate(1))
