"""OAuth client information for wecaredrive."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

GOOGLE_TOKEN_URI: str = "https://oauth2.googleapis.com/token"
GOOGLE_AUTH_URI: str = "https://accounts.google.com/o/oauth2/auth"


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    OAuth client registration.

    `client_secret` may be empty for public (installed/mobile) clients.
    `client_secrets_file`, when given, is used by the installed-app login flow
    instead of the inline id/secret.
    """

    client_id: str
    client_secret: str = ""
    token_uri: str = GOOGLE_TOKEN_URI
    client_secrets_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.client_id, str) or not self.client_id.strip():
            raise ValueError("AuthInfo.client_id must be a non-empty string")
        if not isinstance(self.client_secret, str):
            raise TypeError("AuthInfo.client_secret must be a string")
        if not isinstance(self.token_uri, str) or not self.token_uri.startswith("https://"):
            raise ValueError("AuthInfo.token_uri must be an https URL")

    def client_config(self) -> dict:
        """Client config in the shape google_auth_oauthlib expects."""
        return {
            "installed": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": GOOGLE_AUTH_URI,
                "token_uri": self.token_uri,
                "redirect_uris": ["http://localhost"],
            }
        }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AuthInfo":
        """Read WECARE_CLIENT_ID, WECARE_CLIENT_SECRET and WECARE_CLIENT_SECRETS_FILE."""
        env = os.environ if environ is None else environ
        client_id = env.get("WECARE_CLIENT_ID", "").strip()
        if not client_id:
            raise ValueError("Missing env var: WECARE_CLIENT_ID")
        return cls(
            client_id=client_id,
            client_secret=env.get("WECARE_CLIENT_SECRET", "").strip(),
            client_secrets_file=env.get("WECARE_CLIENT_SECRETS_FILE", "").strip() or None,
        )
