"""
Loading indicator shown while the service call is in flight.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static, LoadingIndicator


class FetchingIndicator(Vertical):
    """Spinner plus a short message; hidden until `start` is called."""

    DEFAULT_CSS = """
    FetchingIndicator {
        display: none;
        height: 1fr;
        align: center middle;
    }

    FetchingIndicator > LoadingIndicator {
        height: 3;
    }

    FetchingIndicator > #fetching-message {
        width: 100%;
        content-align: center middle;
    }
    """

    def __init__(
        self,
        message: str = "Fetching Data...",
        *,
        id: str | None = None,
        classes: str | None = None,
    ):
        super().__init__(id=id, classes=classes)
        self.message = message

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()
        yield Static(self.message, id="fetching-message")

    def start(self) -> None:
        self.display = True

    def stop(self) -> None:
        self.display = False
