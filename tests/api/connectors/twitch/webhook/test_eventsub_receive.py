import json

import pytest

from api.connectors.twitch.models import EventSubMessageType
from api.connectors.twitch.signature import compute_eventsub_signature
from api.connectors.twitch.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_eventsub_request,
)

SECRET = "s3cr37w0rd"

NOTIFICATION = {
    "subscription": {
        "id": "f1c2a387-161a-49f9-a165-0f21d7a4e1c4",
        "status": "enabled",
        "type": "channel.follow",
        "version": "1",
        "condition": {"broadcaster_user_id": "1337"},
        "transport": {"method": "webhook", "callback": "https://example.com/webhooks/callback"},
        "created_at": "2019-11-16T10:11:12.634234626Z",
        "cost": 1,
    },
    "event": {"user_id": "1234", "user_login": "cool_user", "broadcaster_user_id": "1337"},
}


def _headers(body: bytes, message_type: str = "notification") -> dict[str, str]:
    message_id = "befa7b53-d79d-478f-86b9-120f112b044e"
    timestamp = "2019-11-16T10:11:12.634234626Z"
    return {
        "twitch-eventsub-message-id": message_id,
        "twitch-eventsub-message-timestamp": timestamp,
        "twitch-eventsub-message-signature": compute_eventsub_signature(SECRET, message_id, timestamp, body),
        "twitch-eventsub-message-type": message_type,
    }


def test_parse_eventsub_request_ok() -> None:
    body = json.dumps(NOTIFICATION).encode("utf-8")

    delivery = parse_eventsub_request(body, _headers(body), SECRET)

    assert delivery.message_type == EventSubMessageType.NOTIFICATION
    assert delivery.message_id == "befa7b53-d79d-478f-86b9-120f112b044e"
    assert delivery.notification.event == NOTIFICATION["event"]
    assert delivery.notification.subscription.created_at.microsecond == 634234
    assert delivery.notification.challenge is None


def test_parse_eventsub_request_invalid_signature() -> None:
    body = json.dumps(NOTIFICATION).encode("utf-8")
    headers = _headers(body)
    headers["twitch-eventsub-message-signature"] = "sha256=deadbeef"

    with pytest.raises(InvalidSignatureError, match="invalid_signature"):
        parse_eventsub_request(body, headers, SECRET)


def test_parse_eventsub_request_without_secret() -> None:
    body = json.dumps(NOTIFICATION).encode("utf-8")

    with pytest.raises(InvalidSignatureError, match="missing_secret"):
        parse_eventsub_request(body, _headers(body), None)


def test_parse_eventsub_request_invalid_json() -> None:
    body = b"{invalid}"

    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_eventsub_request(body, _headers(body), SECRET)


def test_parse_eventsub_request_missing_subscription() -> None:
    body = b'{"event":{}}'

    with pytest.raises(InvalidJsonError):
        parse_eventsub_request(body, _headers(body), SECRET)
