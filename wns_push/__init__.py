"""Client for the Windows Push Notification Services (WNS) HTTP API."""
from __future__ import annotations

from .client import WindowsNotificationClient, build_auth_body
from .errors import (
    AuthParseFailure,
    InvalidArgument,
    InvalidOption,
    MissingAuthorization,
    TransportFailure,
    WNSError,
)
from .models import (
    AuthResult,
    AuthToken,
    CachePolicy,
    ContentType,
    HttpMethod,
    MatchMode,
    NotificationType,
    RequestForStatus,
    SendResult,
    SuppressPopup,
    is_valid_option,
)
from .options import NotificationOptions
from .templates import (
    Badge,
    Sound,
    custom_sound,
    glyph_badge,
    numeric_badge,
    sound_duration_attribute,
    toast_image_and_text_01,
    toast_image_and_text_02,
    toast_image_and_text_03,
    toast_image_and_text_04,
    toast_text_01,
    toast_text_02,
    toast_text_03,
    toast_text_04,
)

__all__ = [
    "WindowsNotificationClient",
    "build_auth_body",
    "NotificationOptions",
    "AuthToken",
    "AuthResult",
    "SendResult",
    "NotificationType",
    "CachePolicy",
    "RequestForStatus",
    "SuppressPopup",
    "ContentType",
    "MatchMode",
    "HttpMethod",
    "is_valid_option",
    "Sound",
    "Badge",
    "custom_sound",
    "sound_duration_attribute",
    "toast_text_01",
    "toast_text_02",
    "toast_text_03",
    "toast_text_04",
    "toast_image_and_text_01",
    "toast_image_and_text_02",
    "toast_image_and_text_03",
    "toast_image_and_text_04",
    "glyph_badge",
    "numeric_badge",
    "WNSError",
    "InvalidArgument",
    "InvalidOption",
    "MissingAuthorization",
    "AuthParseFailure",
    "TransportFailure",
]
