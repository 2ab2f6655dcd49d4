# user_browser/ui/controllers/status_bar.py
"""Formats and updates the status bar."""

from __future__ import annotations

from textual.widgets import Static

from user_browser.models.fetch_state import Loaded
from user_browser.services.fetch_controller import ControllerSnapshot


class StatusBarController:
    """Builds the human-readable status text and writes it to the bar."""

    STATE_STYLES = {
        "Idle": "white",
        "Loading": "yellow",
        "Loaded": "green",
        "Failed": "red",
    }

    def __init__(self, status_bar: Static) -> None:
        self._bar = status_bar

    # ------------------------------------------------------------------ #
    # public helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def format(snapshot: ControllerSnapshot) -> str:
        """
        The full status line for a snapshot.

        Page details are only added once users are loaded.
        """
        parts: list[str] = [snapshot.status]

        if isinstance(snapshot.state, Loaded):
            page = snapshot.page
            parts.append(f"Users: {page.total}")
            if page.pages:
                parts.append(f"Page: {page.number}/{page.pages}")

        return " | ".join(parts)

    def update(self, snapshot: ControllerSnapshot) -> None:
        """Refresh the whole status line."""
        self._bar.update(self.format(snapshot))

        style = self.STATE_STYLES.get(type(snapshot.state).__name__, "white")
        self._bar.styles.color = style
