"""Authorized, error-translating execution of Drive API requests."""

from __future__ import annotations

import functools
import json
import logging
from typing import Any, Callable, Optional

import httplib2
from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from wecaredrive.errors import (
    RemoteApiError,
    UnauthenticatedError,
    http_error_info,
    map_http_error,
)
from wecaredrive.session import DriveSession

from .fields import ABOUT_FIELDS

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[str], Any]


def success_marker() -> dict[str, Any]:
    """Stand-in result for calls whose response carries no usable body."""
    return {"success": True}


def build_drive_service(access_token: str) -> Any:
    """
    Build a Drive v3 service resource authorised with a bearer token.

    Returns:
        googleapiclient.discovery.Resource
    """
    creds = Credentials(token=access_token)
    return build("drive", "v3", credentials=creds, cache_discovery=False)


class RequestExecutor:
    """
    Execute Drive requests for a session.

    Notes:
        - The service is rebuilt whenever the session's token changes.
        - Each request is sent once; retry policy belongs to the caller.
    """

    def __init__(
        self,
        session: DriveSession,
        *,
        service_factory: Optional[ServiceFactory] = None,
    ) -> None:
        self._session = session
        self._service_factory = service_factory or build_drive_service
        self._service: Any = None
        self._service_generation: Optional[int] = None

    @classmethod
    def from_service(cls, session: DriveSession, service: Any) -> "RequestExecutor":
        """Create an executor around a pre-built Drive service (useful for tests)."""
        return cls(session, service_factory=lambda _token: service)

    @property
    def session(self) -> DriveSession:
        return self._session

    @property
    def service(self) -> Any:
        """
        Drive service for the current token.

        Raises:
            UnauthenticatedError: if the session holds no token.
            RemoteApiError: if the service cannot be built.
        """
        token = self._session.access_token
        if not token:
            raise UnauthenticatedError()
        if self._service is None or self._service_generation != self._session.generation:
            try:
                self._service = self._service_factory(token)
            except Exception as exc:
                mapped = _map_exception(exc)
                logger.debug("Building the Drive service failed: %s", mapped)
                if mapped is exc:
                    raise
                raise mapped from exc
            self._service_generation = self._session.generation
        return self._service

    def execute(self, request: Any) -> Any:
        """
        Send one request and parse its response according to the HTTP method.

        Raises:
            UnauthenticatedError: if the session holds no token.
            RemoteApiError: on a non-success status or transport failure.
        """
        if not self._session.has_token:
            raise UnauthenticatedError()

        method = str(getattr(request, "method", "GET") or "GET").upper()
        request.postproc = functools.partial(parse_response, method)

        try:
            return request.execute()
        except Exception as exc:
            mapped = _map_exception(exc)
            logger.debug("Drive %s request failed: %s", method, mapped)
            if mapped is exc:
                raise
            raise mapped from exc

    def validate(self) -> bool:
        """
        Check the held token with a lightweight about.get call.

        Any non-success HTTP status counts as an invalid token. No token means
        invalid.

        Raises:
            RemoteApiError: with status_code 0 when Drive could not be reached.
        """
        if not self._session.has_token:
            return False
        try:
            request = self.service.about().get(fields=ABOUT_FIELDS)
        except Exception as exc:
            mapped = _map_exception(exc)
            if mapped is exc:
                raise
            raise mapped from exc

        try:
            self.execute(request)
        except RemoteApiError as exc:
            if exc.status_code <= 0:
                raise
            logger.info("Access token failed validation (status %s)", exc.status_code)
            return False
        return True


def parse_response(method: str, resp: Any, content: Any) -> Any:
    """
    Method-aware response parsing.

    - DELETE: no body expected, always the success marker.
    - PATCH: JSON only when the response declares a JSON content type.
    - Others: JSON when the body parses, else the success marker.
    """
    if method == "DELETE":
        return success_marker()

    if method == "PATCH":
        content_type = ""
        if hasattr(resp, "get"):
            content_type = str(resp.get("content-type", "") or "")
        if "application/json" not in content_type.lower():
            return success_marker()

    if isinstance(content, (bytes, bytearray)):
        text = content.decode("utf-8", errors="replace")
    elif isinstance(content, str):
        text = content
    else:
        return success_marker()

    if not text.strip():
        return success_marker()
    try:
        return json.loads(text)
    except ValueError:
        return success_marker()


def _map_exception(exc: Exception) -> Exception:
    if isinstance(exc, (RemoteApiError, UnauthenticatedError)):
        return exc

    if isinstance(exc, HttpError):
        resp = getattr(exc, "resp", None)
        info = http_error_info(
            getattr(resp, "status", None),
            getattr(exc, "content", None),
            getattr(resp, "reason", None),
        )
        return map_http_error(info, cause=exc)

    # A bare access token cannot be refreshed; the transport raises this on 401.
    if isinstance(exc, RefreshError):
        return RemoteApiError(401, str(exc), cause=exc)

    if isinstance(exc, (OSError, TimeoutError, httplib2.HttpLib2Error)):
        return RemoteApiError(
            0,
            str(exc),
            message=f"Operation failed: network error: {exc}",
            cause=exc,
        )

    return RemoteApiError(
        0,
        repr(exc),
        message=f"Operation failed: Drive API error: {exc}",
        cause=exc,
    )
