# user_browser/di.py
"""
Very small dependency-injection helper.
"""

from __future__ import annotations

from typing import Dict, Any

from user_browser.services.fetch_controller import FetchController
from user_browser.services.gateway import HttpUserGateway, UserGateway


class Container:
    """Holds lazily-created singletons."""

    def __init__(self, config: Dict[str, Any], gateway: UserGateway | None = None) -> None:
        self._cfg = config
        self._gateway: UserGateway | None = gateway
        self._fetch_controller: FetchController | None = None

    # ---------- infra ----------
    @property
    def gateway(self) -> UserGateway:
        if self._gateway is None:
            service = self._cfg.get("service", {})
            self._gateway = HttpUserGateway(
                service.get("base_url", "https://jsonplaceholder.typicode.com/"),
                service.get("resource", "users"),
                timeout=service.get("timeout", 30),
                impersonate=service.get("impersonate"),
            )
        return self._gateway

    # ---------- controllers ----------
    @property
    def fetch_controller(self) -> FetchController:
        if self._fetch_controller is None:
            ui = self._cfg.get("ui", {})
            self._fetch_controller = FetchController(
                self.gateway,
                page_size=ui.get("per_page", 3),
                fetch_delay=ui.get("fetch_delay", 0.0),
            )
        return self._fetch_controller


# convenience factory
def build_container(config: Dict[str, Any], gateway: UserGateway | None = None) -> Container:
    """Create a container for the given config, optionally with a gateway already in place."""
    return Container(config, gateway)
