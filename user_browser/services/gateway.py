# user_browser/services/gateway.py
"""
Boundary to the remote user service: one GET, decoded into User models.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional
from urllib.parse import urljoin

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession

from simple_logger import Slogger
from user_browser.errors import DecodeError, NetworkError, ServiceStatusError
from user_browser.models.user import User

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com/"
DEFAULT_RESOURCE = "users"
DEFAULT_TIMEOUT_SECONDS = 30


class UserGateway:
    """Interface for fetching the full user collection."""

    async def fetch_all(self) -> List[User]:
        """
        Fetch every user the service holds, in the order it sends them.

        Returns:
            List of User models

        Raises:
            NetworkError: If the service cannot be reached or answers with an error status
            DecodeError: If the response body is not a JSON array of users
        """
        raise NotImplementedError("Subclasses must implement this method")


def decode_users(payload: Any) -> List[User]:
    """Turn a decoded JSON document into users, or raise DecodeError."""
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of users, got {type(payload).__name__}")
    return [User.from_json(item) for item in payload]


class HttpUserGateway(UserGateway):
    """UserGateway backed by a curl_cffi async session."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        resource: str = DEFAULT_RESOURCE,
        *,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        impersonate: Optional[str] = None,
        session_factory: Callable[[], Any] = AsyncSession,
    ) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        self.url = urljoin(base_url, resource)
        self.timeout = timeout
        self.impersonate = impersonate
        self._session_factory = session_factory

    async def fetch_all(self) -> List[User]:
        Slogger.info(f"Requesting users from {self.url}")

        try:
            async with self._session_factory() as session:
                response = await session.get(
                    self.url,
                    timeout=self.timeout,
                    impersonate=self.impersonate,
                )
        except CurlError as e:
            Slogger.warning(f"Request to {self.url} failed: {e}")
            raise NetworkError(f"Could not reach {self.url}: {e}") from e

        if not 200 <= response.status_code < 300:
            Slogger.warning(
                "Service answered with an error status",
                {"url": self.url, "status": response.status_code},
            )
            raise ServiceStatusError(response.status_code, self.url)

        try:
            payload = response.json()
        except (ValueError, RecursionError) as e:
            Slogger.warning(f"Response from {self.url} is not valid JSON: {e}")
            raise DecodeError(f"Response is not valid JSON: {e}") from e

        users = decode_users(payload)
        Slogger.info(f"Decoded {len(users)} users", {"url": self.url})
        return users
