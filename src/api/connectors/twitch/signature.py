"""Assinatura HMAC-SHA256 das entregas EventSub.

Entrada assinada: message_id + message_timestamp + corpo bruto, sem
separadores, com o secret da subscription como chave.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_PREFIX = "sha256="

MESSAGE_ID_HEADER = "Twitch-Eventsub-Message-Id"
MESSAGE_TIMESTAMP_HEADER = "Twitch-Eventsub-Message-Timestamp"
MESSAGE_SIGNATURE_HEADER = "Twitch-Eventsub-Message-Signature"
MESSAGE_TYPE_HEADER = "Twitch-Eventsub-Message-Type"


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação de assinatura."""

    valid: bool
    error: str | None = None


def _to_bytes(value: bytes | str) -> bytes:
    return value if isinstance(value, bytes) else value.encode("utf-8")


def compute_eventsub_signature(
    secret: str,
    message_id: str,
    message_timestamp: str,
    raw_body: bytes | str,
) -> str:
    """Calcula a assinatura esperada no formato "sha256=<hex>"."""
    message = message_id.encode("utf-8") + message_timestamp.encode("utf-8") + _to_bytes(raw_body)
    digest = hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_eventsub_signature(
    secret: str,
    message_id: str,
    message_timestamp: str,
    raw_body: bytes | str,
    provided_signature: str,
) -> bool:
    """Compara a assinatura recebida com a recalculada (tempo constante).

    Args:
        secret: Secret informado na criação da subscription
        message_id: Header Twitch-Eventsub-Message-Id
        message_timestamp: Header Twitch-Eventsub-Message-Timestamp
        raw_body: Corpo bruto da requisição
        provided_signature: Header Twitch-Eventsub-Message-Signature

    Returns:
        True se a assinatura for válida
    """
    expected = compute_eventsub_signature(secret, message_id, message_timestamp, raw_body)
    return hmac.compare_digest(expected.encode("utf-8"), provided_signature.encode("utf-8"))


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Busca um header sem diferenciar maiúsculas/minúsculas."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def verify_eventsub_notification(
    secret: str | None,
    headers: Mapping[str, str],
    raw_body: bytes | str,
) -> SignatureResult:
    """Valida a assinatura de uma entrega EventSub a partir dos headers.

    Args:
        secret: Secret da subscription
        headers: Headers recebidos
        raw_body: Corpo bruto da requisição

    Returns:
        SignatureResult com o motivo da falha, quando houver
    """
    if not secret:
        return SignatureResult(valid=False, error="missing_secret")

    message_id = get_header(headers, MESSAGE_ID_HEADER)
    message_timestamp = get_header(headers, MESSAGE_TIMESTAMP_HEADER)
    signature = get_header(headers, MESSAGE_SIGNATURE_HEADER)
    if message_id is None or message_timestamp is None or not signature:
        return SignatureResult(valid=False, error="missing_signature_headers")

    if not signature.startswith(SIGNATURE_PREFIX):
        return SignatureResult(valid=False, error="invalid_signature_format")

    if not verify_eventsub_signature(secret, message_id, message_timestamp, raw_body, signature):
        return SignatureResult(valid=False, error="invalid_signature")

    return SignatureResult(valid=True)
