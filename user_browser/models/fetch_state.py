"""Lifecycle states of a fetch, one variant active at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from user_browser.models.user import User


@dataclass(frozen=True, slots=True)
class Idle:
    """Nothing fetched yet, or the last result was discarded."""


@dataclass(frozen=True, slots=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True, slots=True)
class Loaded:
    """The fetch succeeded. Records keep the order the service sent them in."""

    records: Tuple[User, ...] = ()


@dataclass(frozen=True, slots=True)
class Failed:
    """The fetch failed; `message` is fit for display."""

    message: str


FetchState = Union[Idle, Loading, Loaded, Failed]
