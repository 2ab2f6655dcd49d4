"""Domain model for a user record returned by the service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from user_browser.errors import DecodeError


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str

    # ---------- mappings ----------
    @classmethod
    def from_json(cls, doc: Any) -> "User":
        """Build a User from one decoded JSON element, or raise DecodeError."""
        if not isinstance(doc, dict):
            raise DecodeError(f"Expected a JSON object, got {type(doc).__name__}")

        user_id = doc.get("id")
        # bool is an int subclass; the service never sends it as an id
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise DecodeError(f"Field 'id' must be an integer, got {user_id!r}")

        for field_name in ("name", "email"):
            if not isinstance(doc.get(field_name), str):
                raise DecodeError(
                    f"Field '{field_name}' must be a string for user {user_id}"
                )

        return cls(id=user_id, name=doc["name"], email=doc["email"])

    def to_json(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}
