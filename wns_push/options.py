"""Request options for WNS notifications and their rendering into wire headers.

Every enum-backed field is validated on assignment against its option set, so
an invalid value fails at the point it is set instead of at send time.  See
https://learn.microsoft.com/windows/apps/design/shell/tiles-and-notifications/push-request-response-headers
for the meaning of each header.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from .config import MATCH_TYPE_PREFIX
from .errors import InvalidArgument, MissingAuthorization
from .models import (
    DEFAULT_OPTIONS,
    AuthToken,
    CachePolicy,
    ContentType,
    MatchMode,
    NotificationType,
    RequestForStatus,
    SuppressPopup,
    coerce_option,
)


class NotificationOptions:
    """Mutable header configuration shared by any number of sends."""

    def __init__(
        self,
        *,
        notification_type: Any = DEFAULT_OPTIONS[NotificationType],
        cache_policy: Any = DEFAULT_OPTIONS[CachePolicy],
        request_for_status: Any = DEFAULT_OPTIONS[RequestForStatus],
        suppress_popup: Any = DEFAULT_OPTIONS[SuppressPopup],
        content_type: Any = DEFAULT_OPTIONS[ContentType],
        tag: Optional[str] = None,
        ttl: Optional[int] = None,
        group: Optional[str] = None,
        authorization: Optional[AuthToken] = None,
    ) -> None:
        self._authorization: Optional[AuthToken] = None
        self._notification_type: Optional[NotificationType] = None
        self._cache_policy: Optional[CachePolicy] = None
        self._request_for_status: Optional[RequestForStatus] = None
        self._suppress_popup: Optional[SuppressPopup] = None
        self._content_type: Optional[ContentType] = None
        self._tag: Optional[str] = None
        self._ttl: Optional[int] = None
        self._group: Optional[str] = None
        self._match_filter: Optional[str] = None

        self.authorization = authorization
        self.notification_type = notification_type
        self.cache_policy = cache_policy
        self.request_for_status = request_for_status
        self.suppress_popup = suppress_popup
        self.content_type = content_type
        self.tag = tag
        self.ttl = ttl
        self.group = group

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={'<set>' if name == 'authorization' else value!r}"
            for name, value in self.values().items()
        )
        return f"NotificationOptions({fields})"

    # ------------------------------------------------------------------ fields
    @property
    def authorization(self) -> Optional[AuthToken]:
        return self._authorization

    @authorization.setter
    def authorization(self, token: Optional[AuthToken]) -> None:
        if token is not None and not isinstance(token, AuthToken):
            raise InvalidArgument("authorization must be an AuthToken")
        self._authorization = token

    @property
    def notification_type(self) -> Optional[NotificationType]:
        return self._notification_type

    @notification_type.setter
    def notification_type(self, value: Any) -> None:
        self._notification_type = coerce_option(value, NotificationType, "notification_type")

    @property
    def cache_policy(self) -> Optional[CachePolicy]:
        return self._cache_policy

    @cache_policy.setter
    def cache_policy(self, value: Any) -> None:
        self._cache_policy = coerce_option(value, CachePolicy, "cache_policy")

    @property
    def request_for_status(self) -> Optional[RequestForStatus]:
        return self._request_for_status

    @request_for_status.setter
    def request_for_status(self, value: Any) -> None:
        self._request_for_status = coerce_option(value, RequestForStatus, "request_for_status")

    @property
    def suppress_popup(self) -> Optional[SuppressPopup]:
        return self._suppress_popup

    @suppress_popup.setter
    def suppress_popup(self, value: Any) -> None:
        self._suppress_popup = coerce_option(value, SuppressPopup, "suppress_popup")

    @property
    def content_type(self) -> Optional[ContentType]:
        return self._content_type

    @content_type.setter
    def content_type(self, value: Any) -> None:
        self._content_type = coerce_option(value, ContentType, "content_type")

    @property
    def tag(self) -> Optional[str]:
        return self._tag

    @tag.setter
    def tag(self, value: Optional[str]) -> None:
        if value is not None and not isinstance(value, str):
            raise InvalidArgument("tag must be a string")
        self._tag = value

    @property
    def ttl(self) -> Optional[int]:
        """Seconds the notification stays valid after WNS receives it."""
        return self._ttl

    @ttl.setter
    def ttl(self, value: Optional[int]) -> None:
        if value is None:
            self._ttl = None
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument("ttl must be an integer")
        if value < 0:
            raise InvalidArgument("ttl must be non-negative")
        self._ttl = value

    @property
    def group(self) -> Optional[str]:
        return self._group

    @group.setter
    def group(self, value: Optional[str]) -> None:
        if value is not None and not isinstance(value, str):
            raise InvalidArgument("group must be a string")
        self._group = value

    @property
    def match_filter(self) -> Optional[str]:
        return self._match_filter

    def set_match_filter(
        self,
        mode: Any = DEFAULT_OPTIONS[MatchMode],
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Render the X-WNS-Match value used to delete toasts from the action center.

        ``params`` must hold ``tag`` for ``MatchMode.TAG``, ``group`` for
        ``MatchMode.GROUP`` and both for ``MatchMode.TAG_AND_GROUP``.
        ``MatchMode.ALL`` (the default) ignores ``params``; ``None`` clears the filter.
        """
        member = coerce_option(mode, MatchMode, "match_filter")
        params = params or {}
        if not isinstance(params, Mapping):
            raise InvalidArgument("match filter params must be a mapping")
        tag = params.get("tag")
        group = params.get("group")

        if member is MatchMode.TAG:
            if tag is None:
                raise InvalidArgument("match filter params must contain 'tag' for MatchMode.TAG")
            self._match_filter = f"{MATCH_TYPE_PREFIX};tag={tag}"
        elif member is MatchMode.GROUP:
            if group is None:
                raise InvalidArgument("match filter params must contain 'group' for MatchMode.GROUP")
            self._match_filter = f"{MATCH_TYPE_PREFIX};group={group}"
        elif member is MatchMode.TAG_AND_GROUP:
            if tag is None or group is None:
                raise InvalidArgument(
                    "match filter params must contain 'tag' and 'group' for MatchMode.TAG_AND_GROUP"
                )
            self._match_filter = f"{MATCH_TYPE_PREFIX};group={group};tag={tag}"
        elif member is MatchMode.ALL:
            self._match_filter = f"{MATCH_TYPE_PREFIX};all"
        else:
            self._match_filter = None

    def clear_match_filter(self) -> None:
        self._match_filter = None

    def values(self) -> Dict[str, Any]:
        """Stored value of every header-backed field, in header order."""
        return {
            "authorization": self._authorization,
            "notification_type": self._notification_type,
            "cache_policy": self._cache_policy,
            "request_for_status": self._request_for_status,
            "suppress_popup": self._suppress_popup,
            "content_type": self._content_type,
            "tag": self._tag,
            "ttl": self._ttl,
            "group": self._group,
            "match_filter": self._match_filter,
        }

    # --------------------------------------------------------------- rendering
    def header_authorization(self) -> str:
        if self._authorization is None:
            raise MissingAuthorization("No authorization token set; call authenticate() first")
        return f"Authorization: {self._authorization.header_value()}"

    def header_notification_type(self) -> str:
        return f"X-WNS-Type: {_wire(self._notification_type)}"

    def header_cache_policy(self) -> str:
        return f"X-WNS-Cache-Policy: {_wire(self._cache_policy)}"

    def header_request_for_status(self) -> str:
        return f"X-WNS-RequestForStatus: {_wire(self._request_for_status)}"

    def header_suppress_popup(self) -> str:
        return f"X-WNS-SuppressPopup: {_wire(self._suppress_popup)}"

    def header_content_type(self) -> str:
        return f"Content-Type: {_wire(self._content_type)}"

    def header_content_length(self, body: str) -> str:
        return f"Content-Length: {len(body.encode('utf-8'))}"

    def header_tag(self) -> str:
        return f"X-WNS-Tag: {self._tag}"

    def header_ttl(self) -> str:
        return f"X-WNS-TTL: {self._ttl}"

    def header_group(self) -> str:
        return f"X-WNS-Group: {self._group}"

    def header_match_filter(self) -> str:
        return f"X-WNS-Match: {self._match_filter}"

    def assemble_headers(self) -> Dict[str, str]:
        """Map each non-null field to its rendered ``Name: value`` header line."""
        stored = self.values()
        return {
            name: render(self)
            for name, render in HEADER_FIELDS.items()
            if stored[name] is not None
        }

    def wire_headers(self) -> Dict[str, str]:
        """Assembled headers as a ``{name: value}`` dict for the HTTP client."""
        wire: Dict[str, str] = {}
        for line in self.assemble_headers().values():
            name, _, value = line.partition(": ")
            wire[name] = value
        return wire


def _wire(value: Any) -> str:
    return value.value if value is not None else ""


HEADER_FIELDS: Dict[str, Callable[[NotificationOptions], str]] = {
    "authorization": NotificationOptions.header_authorization,
    "notification_type": NotificationOptions.header_notification_type,
    "cache_policy": NotificationOptions.header_cache_policy,
    "request_for_status": NotificationOptions.header_request_for_status,
    "suppress_popup": NotificationOptions.header_suppress_popup,
    "content_type": NotificationOptions.header_content_type,
    "tag": NotificationOptions.header_tag,
    "ttl": NotificationOptions.header_ttl,
    "group": NotificationOptions.header_group,
    "match_filter": NotificationOptions.header_match_filter,
}


__all__ = ["NotificationOptions", "HEADER_FIELDS"]
