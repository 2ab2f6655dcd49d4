"""User browser data models."""

from user_browser.models.user import User
from user_browser.models.pagination import Page
from user_browser.models.fetch_state import FetchState, Idle, Loading, Loaded, Failed

__all__ = ["User", "Page", "FetchState", "Idle", "Loading", "Loaded", "Failed"]
