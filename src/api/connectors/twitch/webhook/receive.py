"""Parse e validação inicial de entregas EventSub (sem logar secrets)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from ..models import EventSubNotification
from ..signature import (
    MESSAGE_ID_HEADER,
    MESSAGE_TIMESTAMP_HEADER,
    MESSAGE_TYPE_HEADER,
    get_header,
    verify_eventsub_notification,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida da entrega."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no corpo da entrega."""


@dataclass(frozen=True)
class EventSubDelivery:
    """Entrega EventSub autenticada."""

    message_id: str
    message_timestamp: str
    message_type: str
    notification: EventSubNotification


def parse_eventsub_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> EventSubDelivery:
    """Valida assinatura e decodifica o corpo da entrega.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Secret da subscription

    Raises:
        InvalidSignatureError: Se assinatura for inválida ou ausente
        InvalidJsonError: Se o corpo não for uma notificação EventSub

    Returns:
        EventSubDelivery com headers relevantes e notificação decodificada
    """
    signature_result = verify_eventsub_notification(secret, headers, raw_body)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        notification = EventSubNotification.model_validate_json(raw_body or b"{}")
    except PydanticValidationError as exc:
        raise InvalidJsonError("invalid_json") from exc

    return EventSubDelivery(
        message_id=get_header(headers, MESSAGE_ID_HEADER) or "",
        message_timestamp=get_header(headers, MESSAGE_TIMESTAMP_HEADER) or "",
        message_type=get_header(headers, MESSAGE_TYPE_HEADER) or "",
        notification=notification,
    )
