from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Mapping, Optional, Type

from .errors import InvalidArgument, InvalidOption


class NotificationType(str, Enum):
    """Values for the X-WNS-Type header."""

    TOAST = "wns/toast"
    BADGE = "wns/badge"
    RAW = "wns/raw"
    TILE = "wns/tile"
    DEFAULT = "wns/toast"


class CachePolicy(str, Enum):
    """Values for the X-WNS-Cache-Policy header."""

    CACHE = "cache"
    NO_CACHE = "no-cache"


class RequestForStatus(str, Enum):
    REQUEST = "true"
    NOT_REQUEST = "false"


class SuppressPopup(str, Enum):
    """Values for X-WNS-SuppressPopup (honoured by Windows Phone only)."""

    SUPPRESS = "true"
    NOT_SUPPRESS = "false"


class ContentType(str, Enum):
    TEXT_XML = "text/xml"
    OCTET_STREAM = "application/octet-stream"
    DEFAULT = "text/xml"


class MatchMode(IntEnum):
    """Selectors accepted by ``NotificationOptions.set_match_filter``."""

    TAG_AND_GROUP = 0
    TAG = 1
    GROUP = 2
    ALL = 3
    DEFAULT = 3


class HttpMethod(str, Enum):
    POST = "POST"
    DELETE = "DELETE"
    DEFAULT = "POST"


# Option sets where ``None`` is a legal member meaning "unset / omit the header".
NULLABLE_OPTIONS = frozenset(
    {NotificationType, CachePolicy, RequestForStatus, SuppressPopup, ContentType, MatchMode}
)

DEFAULT_OPTIONS: Dict[Type[Enum], Optional[Enum]] = {
    NotificationType: NotificationType.DEFAULT,
    CachePolicy: None,
    RequestForStatus: None,
    SuppressPopup: None,
    ContentType: ContentType.DEFAULT,
    MatchMode: MatchMode.DEFAULT,
    HttpMethod: HttpMethod.DEFAULT,
}


def _lookup(value: Any, option_set: Type[Enum]) -> Optional[Enum]:
    if isinstance(value, option_set):
        return value
    # bool is an int subclass; True must not pass for MatchMode.TAG
    if isinstance(value, bool) or isinstance(value, Enum):
        return None
    if issubclass(option_set, IntEnum) and not isinstance(value, int):
        return None
    try:
        return option_set(value)
    except ValueError:
        return None


def is_valid_option(value: Any, option_set: Type[Enum]) -> bool:
    """Return True when ``value`` is a legal member of ``option_set``."""
    if value is None:
        return option_set in NULLABLE_OPTIONS
    return _lookup(value, option_set) is not None


def coerce_option(value: Any, option_set: Type[Enum], field_name: str) -> Optional[Enum]:
    """Return the enum member for ``value`` or raise ``InvalidOption``."""
    if value is None:
        if option_set in NULLABLE_OPTIONS:
            return None
        raise InvalidOption(field_name, option_set, value)
    member = _lookup(value, option_set)
    if member is None:
        raise InvalidOption(field_name, option_set, value)
    return member


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def capitalize_token_type(token_type: str) -> str:
    return token_type[:1].upper() + token_type[1:]


@dataclass(frozen=True, slots=True)
class AuthToken:
    """OAuth access token as returned by the WNS token endpoint."""

    token_type: str
    access_token: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AuthToken":
        token_type = data.get("token_type") if isinstance(data, Mapping) else None
        access_token = data.get("access_token") if isinstance(data, Mapping) else None
        if not isinstance(token_type, str) or not isinstance(access_token, str):
            raise InvalidArgument("Token mapping must contain string 'token_type' and 'access_token'")
        return cls(token_type=capitalize_token_type(token_type), access_token=access_token)

    def header_value(self) -> str:
        return f"{capitalize_token_type(self.token_type)} {self.access_token}"


@dataclass(slots=True)
class AuthResult:
    """Outcome of a client-credentials exchange with the token endpoint."""

    status_code: int
    token_type: Optional[str] = None
    access_token: Optional[str] = None
    expires_in: Optional[int] = None
    error: Optional[str] = None
    error_description: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300 and _is_text(self.access_token)

    def to_token(self) -> AuthToken:
        if not _is_text(self.token_type) or not _is_text(self.access_token):
            detail = self.error or f"status {self.status_code}"
            raise InvalidArgument(f"Authentication did not return a token ({detail})")
        return AuthToken(token_type=self.token_type, access_token=self.access_token)


@dataclass(slots=True)
class SendResult:
    """Response captured from a notification request."""

    status_code: int
    reason: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    request_headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    @property
    def notification_status(self) -> Optional[str]:
        return self.header("X-WNS-Status")

    @property
    def device_connection_status(self) -> Optional[str]:
        return self.header("X-WNS-DeviceConnectionStatus")

    @property
    def message_id(self) -> Optional[str]:
        return self.header("X-WNS-Msg-ID")

    @property
    def debug_trace(self) -> Optional[str]:
        return self.header("X-WNS-Debug-Trace")

    @property
    def error_description(self) -> Optional[str]:
        return self.header("X-WNS-Error-Description")

    @property
    def raw_lines(self) -> List[str]:
        """Status line, header lines, a blank line, then the body split on newlines."""
        lines = [f"HTTP/1.1 {self.status_code} {self.reason}".rstrip()]
        lines.extend(f"{key}: {value}" for key, value in self.headers.items())
        lines.append("")
        if self.body:
            lines.extend(self.body.split("\n"))
        return lines


__all__ = [
    "NotificationType",
    "CachePolicy",
    "RequestForStatus",
    "SuppressPopup",
    "ContentType",
    "MatchMode",
    "HttpMethod",
    "NULLABLE_OPTIONS",
    "DEFAULT_OPTIONS",
    "is_valid_option",
    "coerce_option",
    "capitalize_token_type",
    "AuthToken",
    "AuthResult",
    "SendResult",
]
