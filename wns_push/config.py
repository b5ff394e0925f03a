"""Shared configuration defaults for the WNS push client."""
from __future__ import annotations

import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in {"0", "false", "no"}


def _env_timeout(name: str):
    raw = os.getenv(name)
    if not raw:
        return None
    return float(raw)


AUTH_URL = os.getenv("WNS_AUTH_URL", "https://login.live.com/accesstoken.srf")
AUTH_SCOPE = os.getenv("WNS_SCOPE", "notify.windows.com")
AUTH_GRANT_TYPE = "client_credentials"
AUTH_CONTENT_TYPE = "application/x-www-form-urlencoded"

CLIENT_ID_ENV = "WNS_PACKAGE_SID"
CLIENT_SECRET_ENV = "WNS_CLIENT_SECRET"

VERIFY_TLS = _env_flag("WNS_VERIFY_TLS", "1")
HTTP_TIMEOUT = _env_timeout("WNS_HTTP_TIMEOUT")

XML_PROLOG = '<?xml version="1.0" encoding="utf-8"?>'
MATCH_TYPE_PREFIX = "type=wns/toast"
