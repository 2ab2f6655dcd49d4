"""
Main Textual application class for the user browser
"""

from __future__ import annotations

from typing import Dict, Any

from simple_logger import Slogger

from textual.app import App
from textual.binding import Binding

from user_browser.di import build_container, Container
from user_browser.services.gateway import UserGateway
from user_browser.ui.screens.users_screen import UsersScreen


class UserBrowserApp(App):
    """Terminal client that fetches users from a remote service and pages through them."""

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, config: Dict[str, Any], gateway: UserGateway | None = None) -> None:
        super().__init__()
        self.config = config
        self.container: Container = build_container(config, gateway)

        ui = config.get("ui", {})
        self.title = ui.get("title", "Service Client")
        self.sub_title = ui.get("sub_title", "")

    def on_mount(self) -> None:
        Slogger.info("User browser mounted", {"per_page": self.container.fetch_controller.page_size})
        self.push_screen(
            UsersScreen(
                controller=self.container.fetch_controller,
                config=self.config,
                id="users_screen",
            )
        )
