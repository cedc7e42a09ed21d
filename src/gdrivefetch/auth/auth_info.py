"""Authentication information for gdrivefetch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_KINDS: tuple[str, ...] = ("oauth", "token")


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Supported kinds:
        kind = "oauth"
            Installed-app flow. data must include:
                - client_secrets_file
                - token_file (created/updated after the flow)
        kind = "token"
            Tokens already obtained elsewhere (e.g., by a web front end).
            data must include:
                - token: authorized-user info dict
                  (token, refresh_token, client_id, client_secret, ...)
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"AuthInfo.kind must be one of {_KINDS}")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        if self.kind == "token":
            if not isinstance(self.data.get("token"), dict):
                raise ValueError("AuthInfo.data['token'] must be a dict")
            return

        for key in ("client_secrets_file", "token_file"):
            value = self.data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")

    @property
    def client_secrets_file(self) -> str:
        """Path to OAuth client secrets JSON."""
        return str(self.data["client_secrets_file"])

    @property
    def token_file(self) -> str:
        """Path to OAuth token JSON (authorized user)."""
        return str(self.data["token_file"])

    @property
    def token_info(self) -> dict[str, Any]:
        """Authorized-user info for kind='token'."""
        return dict(self.data["token"])
