from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import quote_plus, urlsplit

import requests

from . import config
from .errors import AuthParseFailure, InvalidArgument, TransportFailure
from .models import (
    DEFAULT_OPTIONS,
    AuthResult,
    HttpMethod,
    SendResult,
    capitalize_token_type,
    coerce_option,
)
from .options import NotificationOptions

LOGGER = logging.getLogger(__name__)


def _redact(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}" if parts.netloc else url


def build_auth_body(client_id: str, client_secret: str, scope: str = config.AUTH_SCOPE) -> str:
    """Form-encoded body for the client-credentials grant."""
    return (
        f"grant_type={config.AUTH_GRANT_TYPE}"
        f"&client_id={quote_plus(client_id)}"
        f"&client_secret={quote_plus(client_secret)}"
        f"&scope={quote_plus(scope)}"
    )


class WindowsNotificationClient:
    """Authenticates against WNS and delivers notifications to channel URIs."""

    def __init__(
        self,
        options: Optional[NotificationOptions] = None,
        *,
        verify_tls: Optional[bool] = None,
        timeout: Optional[float] = None,
        auth_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._options = NotificationOptions()
        if options is not None:
            self.configure(options)
        self.verify_tls = config.VERIFY_TLS if verify_tls is None else verify_tls
        self.timeout = config.HTTP_TIMEOUT if timeout is None else timeout
        self.auth_url = auth_url or config.AUTH_URL
        self._http = session if session is not None else requests
        if not self.verify_tls:
            LOGGER.warning("TLS certificate verification is disabled for WNS requests")

    @property
    def options(self) -> NotificationOptions:
        return self._options

    def configure(self, options: NotificationOptions) -> None:
        if not isinstance(options, NotificationOptions):
            raise InvalidArgument("options must be a NotificationOptions instance")
        self._options = options

    def authenticate(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
    ) -> AuthResult:
        """Request an access token with the app's package SID and client secret.

        Falls back to ``WNS_PACKAGE_SID`` / ``WNS_CLIENT_SECRET`` when the
        credentials are not passed in.  OAuth error bodies (e.g.
        ``invalid_client``) are returned in the result rather than raised; a
        body that is not a JSON object raises ``AuthParseFailure``.
        """
        client_id = client_id or os.getenv(config.CLIENT_ID_ENV)
        client_secret = client_secret or os.getenv(config.CLIENT_SECRET_ENV)
        if not client_id or not client_secret:
            raise InvalidArgument(
                f"client_id and client_secret are required (or set {config.CLIENT_ID_ENV} "
                f"and {config.CLIENT_SECRET_ENV})"
            )

        headers = {"Content-Type": config.AUTH_CONTENT_TYPE}
        try:
            resp = self._http.post(
                self.auth_url,
                headers=headers,
                data=build_auth_body(client_id, client_secret),
                verify=self.verify_tls,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            LOGGER.error("WNS authentication request to %s failed: %s", self.auth_url, exc)
            raise TransportFailure(f"Authentication request failed: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise AuthParseFailure(
                "Token endpoint returned a non-JSON body", status_code=resp.status_code, body=resp.text
            ) from exc
        if not isinstance(payload, dict):
            raise AuthParseFailure(
                "Token endpoint returned JSON that is not an object",
                status_code=resp.status_code,
                body=resp.text,
            )

        result = _auth_result(resp.status_code, payload)
        if result.ok:
            LOGGER.info("Obtained WNS access token (expires in %s s)", result.expires_in)
        else:
            LOGGER.warning(
                "WNS authentication responded with %s: %s", result.status_code, result.error or "no token"
            )
        return result

    def send(
        self,
        channel: str,
        payload: str = "",
        method: Any = DEFAULT_OPTIONS[HttpMethod],
    ) -> SendResult:
        """Deliver ``payload`` to ``channel`` using the configured options.

        ``HttpMethod.DELETE`` sends no body and an explicit ``Content-Length: 0``.
        """
        method = coerce_option(method, HttpMethod, "method")
        if not isinstance(channel, str) or not channel:
            raise InvalidArgument("channel must be a non-empty URL string")

        # Raises MissingAuthorization before any I/O.
        self._options.header_authorization()
        headers = self._options.wire_headers()

        body: Optional[bytes] = None
        if method is HttpMethod.DELETE:
            headers["Content-Length"] = "0"
        else:
            if not isinstance(payload, str):
                raise InvalidArgument("payload must be a string")
            body = payload.encode("utf-8")
            _, _, length = self._options.header_content_length(payload).partition(": ")
            headers["Content-Length"] = length

        try:
            resp = self._http.request(
                method.value,
                channel,
                headers=headers,
                data=body,
                verify=self.verify_tls,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            LOGGER.error("WNS %s to %s failed: %s", method.value, _redact(channel), exc)
            raise TransportFailure(f"Notification request failed: {exc}") from exc

        result = SendResult(
            status_code=resp.status_code,
            reason=resp.reason or "",
            headers=dict(resp.headers),
            body=resp.text,
            request_headers=headers,
        )
        if resp.status_code >= 400:
            LOGGER.warning(
                "WNS responded with %s to %s: %s",
                resp.status_code,
                _redact(channel),
                result.error_description or resp.text[:120],
            )
        else:
            LOGGER.info(
                "Sent %s notification to %s (status %s)",
                headers.get("X-WNS-Type", "untyped"),
                _redact(channel),
                result.notification_status or resp.status_code,
            )
        return result


def _auth_result(status_code: int, payload: Dict[str, Any]) -> AuthResult:
    token_type = payload.get("token_type")
    expires_in = payload.get("expires_in")
    try:
        expires_in = int(expires_in) if expires_in is not None else None
    except (TypeError, ValueError):
        expires_in = None
    return AuthResult(
        status_code=status_code,
        token_type=capitalize_token_type(token_type) if isinstance(token_type, str) else None,
        access_token=payload.get("access_token"),
        expires_in=expires_in,
        error=payload.get("error"),
        error_description=payload.get("error_description"),
        raw=payload,
    )


__all__ = ["WindowsNotificationClient", "build_auth_body"]
