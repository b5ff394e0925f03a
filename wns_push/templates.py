"""Toast and badge payload builders.

Toast layouts follow the legacy ToastText/ToastImageAndText template catalogue
and badges the glyph/numeric badge schema.  Caller supplied text and attribute
values are XML-escaped; ``sound`` arguments are audio elements and are
inserted as markup.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any, Iterable, Optional, Union
from xml.sax.saxutils import escape

from .config import XML_PROLOG
from .errors import InvalidArgument
from .models import coerce_option


def _audio(src: str, loop: bool) -> str:
    return f'<audio src="{src}" loop="{"true" if loop else "false"}" />'


class Sound(str, Enum):
    """Built-in audio elements for toast notifications."""

    SILENT = '<audio silent="true" />'

    NOTIFICATION_DEFAULT = _audio("ms-winsoundevent:Notification.Default", False)
    NOTIFICATION_IM = _audio("ms-winsoundevent:Notification.IM", False)
    NOTIFICATION_MAIL = _audio("ms-winsoundevent:Notification.Mail", False)
    NOTIFICATION_REMINDER = _audio("ms-winsoundevent:Notification.Reminder", False)
    NOTIFICATION_SMS = _audio("ms-winsoundevent:Notification.SMS", False)

    LOOPING_ALARM = _audio("ms-winsoundevent:Notification.Looping.Alarm", True)
    LOOPING_ALARM2 = _audio("ms-winsoundevent:Notification.Looping.Alarm2", True)
    LOOPING_ALARM3 = _audio("ms-winsoundevent:Notification.Looping.Alarm3", True)
    LOOPING_ALARM4 = _audio("ms-winsoundevent:Notification.Looping.Alarm4", True)
    LOOPING_ALARM5 = _audio("ms-winsoundevent:Notification.Looping.Alarm5", True)
    LOOPING_ALARM6 = _audio("ms-winsoundevent:Notification.Looping.Alarm6", True)
    LOOPING_ALARM7 = _audio("ms-winsoundevent:Notification.Looping.Alarm7", True)
    LOOPING_ALARM8 = _audio("ms-winsoundevent:Notification.Looping.Alarm8", True)
    LOOPING_ALARM9 = _audio("ms-winsoundevent:Notification.Looping.Alarm9", True)
    LOOPING_ALARM10 = _audio("ms-winsoundevent:Notification.Looping.Alarm10", True)

    LOOPING_CALL = _audio("ms-winsoundevent:Notification.Looping.Call", True)
    LOOPING_CALL2 = _audio("ms-winsoundevent:Notification.Looping.Call2", True)
    LOOPING_CALL3 = _audio("ms-winsoundevent:Notification.Looping.Call3", True)
    LOOPING_CALL4 = _audio("ms-winsoundevent:Notification.Looping.Call4", True)
    LOOPING_CALL5 = _audio("ms-winsoundevent:Notification.Looping.Call5", True)
    LOOPING_CALL6 = _audio("ms-winsoundevent:Notification.Looping.Call6", True)
    LOOPING_CALL7 = _audio("ms-winsoundevent:Notification.Looping.Call7", True)
    LOOPING_CALL8 = _audio("ms-winsoundevent:Notification.Looping.Call8", True)
    LOOPING_CALL9 = _audio("ms-winsoundevent:Notification.Looping.Call9", True)
    LOOPING_CALL10 = _audio("ms-winsoundevent:Notification.Looping.Call10", True)


class Badge(str, Enum):
    """Glyph values accepted by the badge schema."""

    NONE = "none"
    ACTIVITY = "activity"
    ALARM = "alarm"
    ALERT = "alert"
    ATTENTION = "attention"
    AVAILABLE = "available"
    AWAY = "away"
    BUSY = "busy"
    ERROR = "error"
    NEW_MESSAGE = "newMessage"
    PAUSED = "paused"
    PLAYING = "playing"
    UNAVAILABLE = "unavailable"


SoundLike = Union[Sound, str]


def custom_sound(url: str, loop: bool = False) -> str:
    """Audio element for an app-packaged or ms-winsoundevent sound."""
    return _audio(_attr(url), loop)


def sound_duration_attribute(sound: SoundLike) -> str:
    """Return ``duration="long"`` when the sound loops, otherwise an empty string.

    Markup that does not parse as an element is treated as non-looping.
    """
    markup = _sound_markup(sound)
    try:
        element = ET.fromstring(markup)
    except ET.ParseError:
        return ""
    if element.get("silent") == "true":
        return ""
    return 'duration="long"' if element.get("loop") == "true" else ""


def _sound_markup(sound: SoundLike) -> str:
    if isinstance(sound, Sound):
        return sound.value
    if not isinstance(sound, str):
        raise InvalidArgument("sound must be a Sound member or an audio element string")
    return sound


def _text(value: Any) -> str:
    return escape(str(value))


def _attr(value: Any) -> str:
    return escape(str(value), {'"': "&quot;"})


def _toast(
    template: str,
    texts: Iterable[Any],
    sound: SoundLike,
    image: Optional[tuple] = None,
) -> str:
    duration = sound_duration_attribute(sound)
    opening = f"<toast {duration}>" if duration else "<toast>"
    parts = [XML_PROLOG, opening, "<visual>", f'<binding template="{template}">']
    if image is not None:
        src, alt = image
        parts.append(f'<image id="1" src="{_attr(src)}" alt="{_attr(alt)}"/>')
    for index, value in enumerate(texts, start=1):
        parts.append(f'<text id="{index}">{_text(value)}</text>')
    parts.extend(["</binding>", "</visual>", _sound_markup(sound), "</toast>"])
    return "".join(parts)


def toast_text_01(body_text: str, sound: SoundLike = Sound.NOTIFICATION_DEFAULT) -> str:
    """One string of text wrapped across up to three lines."""
    return _toast("ToastText01", [body_text], sound)


def toast_text_02(headline: str, body_text: str, sound: SoundLike = Sound.NOTIFICATION_DEFAULT) -> str:
    """A bold headline on the first line and wrapped body text below it."""
    return _toast("ToastText02", [headline, body_text], sound)


def toast_text_03(headline: str, body_text: str, sound: SoundLike = Sound.NOTIFICATION_DEFAULT) -> str:
    """A headline wrapped across two lines and one line of body text."""
    return _toast("ToastText03", [headline, body_text], sound)


def toast_text_04(
    headline: str,
    body_text_1: str,
    body_text_2: str,
    sound: SoundLike = Sound.NOTIFICATION_DEFAULT,
) -> str:
    return _toast("ToastText04", [headline, body_text_1, body_text_2], sound)


def toast_image_and_text_01(
    body_text: str,
    src: str,
    alt: str = "",
    sound: SoundLike = Sound.NOTIFICATION_DEFAULT,
) -> str:
    """Image with wrapped body text.

    ``src`` may be an http(s) URL, ``ms-appx:///`` (app package),
    ``ms-appdata:///local/`` (local storage) or ``file:///`` (desktop apps only).
    """
    return _toast("ToastImageAndText01", [body_text], sound, image=(src, alt))


def toast_image_and_text_02(
    headline: str,
    body_text: str,
    src: str,
    alt: str = "",
    sound: SoundLike = Sound.NOTIFICATION_DEFAULT,
) -> str:
    return _toast("ToastImageAndText02", [headline, body_text], sound, image=(src, alt))


def toast_image_and_text_03(
    headline: str,
    body_text: str,
    src: str,
    alt: str = "",
    sound: SoundLike = Sound.NOTIFICATION_DEFAULT,
) -> str:
    return _toast("ToastImageAndText03", [headline, body_text], sound, image=(src, alt))


def toast_image_and_text_04(
    headline: str,
    body_text_1: str,
    body_text_2: str,
    src: str,
    alt: str = "",
    sound: SoundLike = Sound.NOTIFICATION_DEFAULT,
) -> str:
    return _toast(
        "ToastImageAndText04", [headline, body_text_1, body_text_2], sound, image=(src, alt)
    )


def glyph_badge(glyph: Union[Badge, str]) -> str:
    member = coerce_option(glyph, Badge, "badge")
    return f'{XML_PROLOG}<badge value="{member.value}"/>'


def numeric_badge(value: Any) -> str:
    """Numeric badge; anything but a non-negative integer renders as 0."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        value = 0
    return f'{XML_PROLOG}<badge value="{value}"/>'


__all__ = [
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
]
