"""Validação local de requisições de subscription EventSub.

Regras checadas em ordem (a primeira falha vence):
1. Tamanho do secret entre MIN_SECRET_LENGTH e MAX_SECRET_LENGTH
2. Callback obrigatoriamente https

Demais restrições (duplicidade, auth, quota) são aplicadas pelo servidor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.twitch.errors import ValidationError, ValidationErrorKind

if TYPE_CHECKING:
    from api.connectors.twitch.models import EventSubSubscription

MIN_SECRET_LENGTH = 10
MAX_SECRET_LENGTH = 100
SECURE_CALLBACK_PREFIX = "https://"


def validate_subscription(subscription: EventSubSubscription) -> ValidationError | None:
    """Valida uma subscription antes do envio.

    Args:
        subscription: Requisição de criação

    Returns:
        ValidationError da primeira regra violada, ou None se válida
    """
    transport = subscription.transport

    if not MIN_SECRET_LENGTH <= len(transport.secret) <= MAX_SECRET_LENGTH:
        return ValidationError(
            ValidationErrorKind.INVALID_SECRET_LENGTH,
            f"secret must be between {MIN_SECRET_LENGTH} and {MAX_SECRET_LENGTH} characters",
        )

    if not transport.callback.startswith(SECURE_CALLBACK_PREFIX):
        return ValidationError(
            ValidationErrorKind.INSECURE_CALLBACK,
            "callback must use https",
        )

    return None
