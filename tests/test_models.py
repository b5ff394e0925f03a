import pytest

from wns_push.errors import InvalidArgument, InvalidOption
from wns_push.models import (
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
    DEFAULT_OPTIONS,
    coerce_option,
    is_valid_option,
)


@pytest.mark.parametrize(
    "value, option_set, expected",
    [
        ("wns/toast", NotificationType, True),
        (NotificationType.TILE, NotificationType, True),
        ("wns/banner", NotificationType, False),
        (None, NotificationType, True),
        ("no-cache", CachePolicy, True),
        ("nocache", CachePolicy, False),
        ("true", RequestForStatus, True),
        (True, RequestForStatus, False),
        ("false", SuppressPopup, True),
        ("application/octet-stream", ContentType, True),
        ("application/json", ContentType, False),
        (0, MatchMode, True),
        (3, MatchMode, True),
        (4, MatchMode, False),
        (True, MatchMode, False),
        (3.0, MatchMode, False),
        (1.0, MatchMode, False),
        ("1", MatchMode, False),
        ("DELETE", HttpMethod, True),
        ("PUT", HttpMethod, False),
        (None, HttpMethod, False),
    ],
)
def test_is_valid_option(value, option_set, expected):
    assert is_valid_option(value, option_set) is expected


def test_default_aliases_point_at_members():
    assert NotificationType.DEFAULT is NotificationType.TOAST
    assert ContentType.DEFAULT is ContentType.TEXT_XML
    assert MatchMode.DEFAULT is MatchMode.ALL
    assert HttpMethod.DEFAULT is HttpMethod.POST


def test_member_from_other_option_set_is_rejected():
    assert not is_valid_option(RequestForStatus.REQUEST, SuppressPopup)


def test_coerce_option_names_field_and_set():
    with pytest.raises(InvalidOption) as excinfo:
        coerce_option("sometimes", CachePolicy, "cache_policy")
    assert excinfo.value.field == "cache_policy"
    assert excinfo.value.expected is CachePolicy
    assert "cache_policy" in str(excinfo.value)
    assert "CachePolicy" in str(excinfo.value)


def test_auth_token_from_mapping_capitalizes_type():
    token = AuthToken.from_mapping({"token_type": "bearer", "access_token": "abc"})
    assert token.token_type == "Bearer"
    assert token.access_token == "abc"
    assert token.header_value() == "Bearer abc"


@pytest.mark.parametrize(
    "data",
    [
        {"token_type": "bearer"},
        {"access_token": "abc"},
        {},
        ["bearer", "abc"],
    ],
)
def test_auth_token_from_mapping_requires_both_keys(data):
    with pytest.raises(InvalidArgument):
        AuthToken.from_mapping(data)


def test_auth_result_to_token():
    result = AuthResult(status_code=200, token_type="Bearer", access_token="tok")
    assert result.ok
    assert result.to_token() == AuthToken("Bearer", "tok")

    failed = AuthResult(status_code=400, error="invalid_client")
    assert not failed.ok
    with pytest.raises(InvalidArgument, match="invalid_client"):
        failed.to_token()


def test_send_result_headers_and_raw_lines():
    result = SendResult(
        status_code=200,
        reason="OK",
        headers={"X-WNS-Status": "received", "X-WNS-Msg-ID": "1A2B"},
        body="",
    )
    assert result.ok
    assert result.notification_status == "received"
    assert result.header("x-wns-msg-id") == "1A2B"
    assert result.device_connection_status is None
    assert result.raw_lines == [
        "HTTP/1.1 200 OK",
        "X-WNS-Status: received",
        "X-WNS-Msg-ID: 1A2B",
        "",
    ]


@pytest.mark.parametrize(
    "access_token, token_type",
    [(12345, "Bearer"), ("", "Bearer"), ("tok", 7), ("tok", None)],
)
def test_auth_result_rejects_non_string_tokens(access_token, token_type):
    result = AuthResult(status_code=200, token_type=token_type, access_token=access_token)
    with pytest.raises(InvalidArgument):
        result.to_token()
    if not isinstance(access_token, str) or not access_token:
        assert not result.ok


def test_default_options_are_members_of_their_sets():
    for option_set, default in DEFAULT_OPTIONS.items():
        assert is_valid_option(default, option_set)
    assert DEFAULT_OPTIONS[HttpMethod] is HttpMethod.POST
    assert DEFAULT_OPTIONS[CachePolicy] is None
