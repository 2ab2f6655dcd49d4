"""
Start panel: what the client does, plus the button that starts a fetch.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Label, Static

SERVICE_TEXT = (
    "The Service (Backend) holds the Database and Logic.\n\n"
    "This App (Client) only requests data and displays it."
)

ARCHITECTURE_TEXT = (
    "Whether the backend runs on:\n"
    "1. Local Machine\n"
    "2. Production Server\n"
    "3. Cloud (AWS/Google App Engine)\n\n"
    "The Client code remains IDENTICAL."
)


class IntroPanel(Vertical):
    """Shown while there is nothing loaded."""

    DEFAULT_CSS = """
    IntroPanel {
        height: auto;
        padding: 1 2;
    }

    IntroPanel > .card {
        border: round $accent;
        padding: 0 1;
        margin-bottom: 1;
        height: auto;
    }

    IntroPanel .card-title {
        text-style: bold;
    }

    IntroPanel > #connect-btn {
        width: 100%;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(classes="card"):
            yield Label("What is a Service?", classes="card-title")
            yield Static(SERVICE_TEXT)
        with Vertical(classes="card"):
            yield Label("Architectural Stability", classes="card-title")
            yield Static(ARCHITECTURE_TEXT)
        yield Button("Connect to Service", id="connect-btn", variant="primary")
