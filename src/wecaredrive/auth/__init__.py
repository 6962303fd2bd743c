"""Public auth exports for wecaredrive."""

from __future__ import annotations

from .auth_info import GOOGLE_TOKEN_URI, AuthInfo
from .oauth_client import DEFAULT_SCOPES, OAuthClient, TokenPair

__all__ = ["AuthInfo", "OAuthClient", "TokenPair", "DEFAULT_SCOPES", "GOOGLE_TOKEN_URI"]
