"""Webhook EventSub: assinatura e parsing seguro."""

from ..signature import SignatureResult, verify_eventsub_notification
from .receive import (
    EventSubDelivery,
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_eventsub_request,
)

__all__ = [
    "EventSubDelivery",
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookRequestError",
    "parse_eventsub_request",
    "verify_eventsub_notification",
]
