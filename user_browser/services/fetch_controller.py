# user_browser/services/fetch_controller.py
"""
Owns the fetch state machine and the current page of the user view.

    Idle    --start_fetch--> Loading
    Loading --success------> Loaded
    Loading --failure------> Failed
    Loaded  --reset--------> Idle
    Failed  --reset--------> Idle
    Failed  --start_fetch--> Loading
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Tuple

from simple_logger import Slogger
from user_browser.errors import GatewayError
from user_browser.models.fetch_state import FetchState, Failed, Idle, Loaded, Loading
from user_browser.models.pagination import Page
from user_browser.models.user import User
from user_browser.services.gateway import UserGateway
from user_browser.services.paginator import paginate, total_pages
from user_browser.services.status import status_text

DEFAULT_PAGE_SIZE = 3


@dataclass(frozen=True, slots=True)
class ControllerSnapshot:
    """Read-only view of the controller handed to the presentation layer."""

    state: FetchState
    page: Page[User]
    status: str


Listener = Callable[[ControllerSnapshot], None]


def describe_error(error: BaseException) -> str:
    """Message for a Failed state; never empty."""
    return str(error) or type(error).__name__


class FetchController:
    """Drives one UserGateway and keeps the fetched users paginated."""

    def __init__(
        self,
        gateway: UserGateway,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        fetch_delay: float = 0.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        if fetch_delay < 0:
            raise ValueError(f"fetch_delay cannot be negative, got {fetch_delay}")

        self._gateway = gateway
        self._page_size = page_size
        self._fetch_delay = fetch_delay
        self._sleep = sleep

        self._state: FetchState = Idle()
        self._page_index = 0
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------ #
    # read side
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def records(self) -> Tuple[User, ...]:
        if isinstance(self._state, Loaded):
            return self._state.records
        return ()

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.records), self._page_size)

    @property
    def status(self) -> str:
        return status_text(self._state)

    def page(self) -> Page[User]:
        """The currently visible page."""
        return paginate(self.records, self._page_index, self._page_size)

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(state=self._state, page=self.page(), status=self.status)

    # ------------------------------------------------------------------ #
    # observers
    # ------------------------------------------------------------------ #

    def subscribe(self, callback: Listener) -> None:
        """Call `callback` with a fresh snapshot after every change."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> bool:
        if callback in self._listeners:
            self._listeners.remove(callback)
            return True
        return False

    # ------------------------------------------------------------------ #
    # operations
    # ------------------------------------------------------------------ #

    async def start_fetch(self) -> bool:
        """
        Fetch all users from the gateway.

        Only runs from Idle or Failed. While a fetch is already in flight, or
        once users are loaded, the call is ignored.

        Returns:
            True if a fetch was performed, False if the call was ignored
        """
        if isinstance(self._state, Loading):
            Slogger.debug("start_fetch ignored: a fetch is already in flight")
            return False
        if isinstance(self._state, Loaded):
            Slogger.debug("start_fetch ignored: users already loaded, reset first")
            return False

        self._set_state(Loading())

        try:
            if self._fetch_delay > 0:
                await self._sleep(self._fetch_delay)
            users = await self._gateway.fetch_all()
        except asyncio.CancelledError:
            Slogger.warning("Fetch cancelled while in flight")
            self._set_state(Failed("Fetch cancelled"))
            raise
        except GatewayError as e:
            Slogger.warning(f"Fetch failed: {type(e).__name__} - {e}")
            self._set_state(Failed(describe_error(e)))
            return True
        except Exception as e:
            Slogger.exception(e, "Unexpected error while fetching users")
            self._set_state(Failed(describe_error(e)))
            return True

        self._set_state(Loaded(tuple(users)))
        return True

    def reset(self) -> bool:
        """
        Discard any result and return to Idle.

        Ignored while a fetch is in flight.
        """
        if isinstance(self._state, Loading):
            Slogger.warning("reset ignored: a fetch is in flight")
            return False

        self._set_state(Idle())
        return True

    def next_page(self) -> bool:
        if not isinstance(self._state, Loaded):
            return False
        if self._page_index >= self.total_pages - 1:
            return False
        return self._move_to(self._page_index + 1)

    def previous_page(self) -> bool:
        if not isinstance(self._state, Loaded):
            return False
        if self._page_index <= 0:
            return False
        return self._move_to(self._page_index - 1)

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _set_state(self, state: FetchState) -> None:
        # every transition replaces or clears the records
        previous = type(self._state).__name__
        self._state = state
        self._page_index = 0
        Slogger.info(
            f"Fetch state {previous} -> {type(state).__name__}",
            {"records": len(self.records)},
        )
        self._notify()

    def _move_to(self, page_index: int) -> bool:
        self._page_index = page_index
        Slogger.debug(f"Moved to page {page_index + 1}/{self.total_pages}")
        self._notify()
        return True

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for callback in list(self._listeners):
            try:
                callback(snapshot)
            except Exception as e:
                # A broken observer must not leave the controller mid-transition
                Slogger.exception(e, "Error in fetch controller listener")
