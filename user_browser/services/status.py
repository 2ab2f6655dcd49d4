"""Human-readable status line derived from a FetchState."""

from __future__ import annotations

from user_browser.models.fetch_state import FetchState, Failed, Idle, Loaded, Loading

READY = "Client Ready"
CALLING = "Client: Calling Service..."


def status_text(state: FetchState) -> str:
    if isinstance(state, Loading):
        return CALLING
    if isinstance(state, Loaded):
        return f"Client: Received {len(state.records)} Users."
    if isinstance(state, Failed):
        return f"Error: {state.message}"
    if isinstance(state, Idle):
        return READY
    raise TypeError(f"Unknown fetch state: {state!r}")
