# user_browser/ui/screens/users_screen.py
"""
Main screen: start panel, loading indicator and the paginated user list.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from textual import work
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Label, Static

from simple_logger import Slogger

# Business layer
from user_browser.services.fetch_controller import ControllerSnapshot, FetchController

# Domain models
from user_browser.models.fetch_state import Failed, Idle, Loaded, Loading

# UI helpers
from user_browser.ui.controllers.status_bar import StatusBarController

# Widgets
from user_browser.ui.widgets.intro_panel import IntroPanel
from user_browser.ui.widgets.loading_indicator import FetchingIndicator
from user_browser.ui.widgets.pagination import Pagination
from user_browser.ui.widgets.user_table import UserTable


class UsersScreen(Screen):
    """Renders whatever the FetchController currently holds."""

    BINDINGS = [
        ("c", "connect", "Connect"),
        ("n", "next_page", "Next Page"),
        ("right", "next_page", "Next Page"),
        ("p", "prev_page", "Prev Page"),
        ("left", "prev_page", "Prev Page"),
        ("x", "close", "Close"),
    ]

    DEFAULT_CSS = """
    UsersScreen #data-panel {
        display: none;
        height: 1fr;
        padding: 0 2;
    }

    UsersScreen #data-header {
        height: 3;
    }

    UsersScreen #data-heading {
        width: 1fr;
        height: 3;
        content-align: left middle;
        text-style: bold;
    }

    UsersScreen #users-table {
        height: 1fr;
    }

    UsersScreen #status-bar {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    """

    # ------------------------------------------------------------------ #

    def __init__(
        self,
        controller: FetchController,
        config: Optional[Dict[str, Any]] = None,
        *,
        id: str = "users_screen",
    ) -> None:
        super().__init__(id=id)
        self.config = config or {}
        self.controller = controller

    # ------------------------------------------------------------------ #
    # Compose & mount
    # ------------------------------------------------------------------ #

    def compose(self) -> ComposeResult:
        yield Header()

        with Container(id="main-container"):
            yield IntroPanel(id="intro-panel")
            yield FetchingIndicator(id="fetching")
            with Vertical(id="data-panel"):
                with Horizontal(id="data-header"):
                    yield Label("▼ Service Data", id="data-heading")
                    yield Button("✕ Close", id="close-btn", variant="error")
                yield UserTable(id="users-table")
                yield Pagination(id="pagination")

        yield Static(id="status-bar", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.status_controller = StatusBarController(self.query_one("#status-bar", Static))
        self.controller.subscribe(self.show_snapshot)
        self.show_snapshot(self.controller.snapshot())

    def on_unmount(self) -> None:
        self.controller.unsubscribe(self.show_snapshot)

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def show_snapshot(self, snapshot: ControllerSnapshot) -> None:
        """Bring every widget in line with the controller snapshot."""
        state = snapshot.state
        page = snapshot.page

        self.query_one(IntroPanel).display = isinstance(state, (Idle, Failed))
        # No second request from the button while one is in flight
        self.query_one("#connect-btn", Button).disabled = isinstance(state, Loading)

        fetching = self.query_one(FetchingIndicator)
        if isinstance(state, Loading):
            fetching.start()
        else:
            fetching.stop()

        data_panel = self.query_one("#data-panel", Vertical)
        data_panel.display = isinstance(state, Loaded)
        if isinstance(state, Loaded):
            if page.pages:
                heading = f"▼ Service Data ({page.number}/{page.pages})"
            else:
                heading = "▼ Service Data (no users)"
            self.query_one("#data-heading", Label).update(heading)
            self.query_one(UserTable).show_users(page.items)
            self.query_one(Pagination).update_pages(page.page, page.pages)

        self.status_controller.update(snapshot)

        if isinstance(state, Failed):
            self.notify(state.message, title="Service call failed", severity="error")

    # ------------------------------------------------------------------ #
    # Actions
    # ------------------------------------------------------------------ #

    def action_connect(self) -> None:
        if isinstance(self.controller.state, (Idle, Failed)):
            self.fetch_users()

    def action_next_page(self) -> None:
        self.controller.next_page()

    def action_prev_page(self) -> None:
        self.controller.previous_page()

    def action_close(self) -> None:
        if self.controller.reset():
            Slogger.info("Closed user list")

    @work(group="fetch")
    async def fetch_users(self) -> None:
        Slogger.info("Connecting to service")
        await self.controller.start_fetch()

    # ------------------------------------------------------------------ #
    # Event handlers
    # ------------------------------------------------------------------ #

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "connect-btn":
            self.action_connect()
        elif event.button.id == "close-btn":
            self.action_close()

    def on_pagination_navigate(self, event: Pagination.Navigate) -> None:
        if event.step > 0:
            self.controller.next_page()
        else:
            self.controller.previous_page()
