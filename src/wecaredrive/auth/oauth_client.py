"""OAuth token utilities for wecaredrive."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from wecaredrive.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)

DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive.file",)


@dataclass(slots=True, frozen=True)
class TokenPair:
    access_token: str
    refresh_token: Optional[str] = None


class OAuthClient:
    """Obtain and refresh OAuth access tokens for the Drive session."""

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info

    def refresh_access_token(self, refresh_token: str) -> Optional[str]:
        """
        Exchange a refresh token for a new access token (grant_type=refresh_token).

        Returns:
            The new access token, or None if the token endpoint rejected the grant.

        Raises:
            InvalidArgumentError: if refresh_token is empty.
            AuthError: on transport or library failures.
        """
        if not isinstance(refresh_token, str) or not refresh_token.strip():
            raise InvalidArgumentError("refresh_token must be a non-empty string")

        try:
            from google.auth.exceptions import RefreshError
            from google.auth.transport.requests import Request
            from google.oauth2.credentials import Credentials
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        creds = Credentials(
            token=None,
            refresh_token=refresh_token,
            token_uri=self._auth_info.token_uri,
            client_id=self._auth_info.client_id,
            client_secret=self._auth_info.client_secret,
        )
        try:
            creds.refresh(Request())
        except RefreshError as exc:
            logger.warning("Refresh token was rejected: %s", exc)
            return None
        except Exception as exc:
            raise AuthError(
                "Error refreshing token",
                details={"token_uri": self._auth_info.token_uri},
                cause=exc,
            ) from exc

        return creds.token or None

    def login(self, scopes: Sequence[str] = DEFAULT_SCOPES) -> TokenPair:
        """
        Run the installed-app OAuth flow in a local browser.

        Raises:
            InvalidArgumentError: if scopes is invalid.
            AuthError: on flow failures.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        try:
            from google_auth_oauthlib.flow import InstalledAppFlow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth-oauthlib"},
                cause=exc,
            ) from exc

        try:
            if self._auth_info.client_secrets_file:
                flow = InstalledAppFlow.from_client_secrets_file(
                    self._auth_info.client_secrets_file,
                    scopes=list(scopes),
                )
            else:
                flow = InstalledAppFlow.from_client_config(
                    self._auth_info.client_config(),
                    scopes=list(scopes),
                )
            creds = flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization flow failed",
                details={"client_secrets_file": self._auth_info.client_secrets_file},
                cause=exc,
            ) from exc

        if not creds.token:
            raise AuthError("OAuth authorization flow returned no access token")
        return TokenPair(access_token=creds.token, refresh_token=creds.refresh_token)
