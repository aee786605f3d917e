"""Conector Twitch - adapter de borda para Helix API e EventSub.

Responsabilidades:
- Cliente HTTP para o recurso EventSub subscriptions
- Validação local de subscriptions (secret, callback)
- Envelope tipado de resposta (sucesso/erro)
- Verificação de assinatura de webhooks
"""

from .client import HelixClient, create_helix_client
from .errors import DecodeError, HelixError, TransportError, ValidationError, ValidationErrorKind
from .http_base import HttpClientConfig, HttpxRequestExecutor
from .models import (
    EventSubMessageType,
    EventSubNotification,
    EventSubSubscription,
    EventSubSubscriptionRecord,
    EventSubSubscriptionsParams,
    EventSubTransport,
    ManyEventSubSubscriptions,
    SubscriptionStatus,
)
from .response import ApiErrorBody, ApiFailure, ApiSuccess, RateLimit, shape_response
from .signature import (
    SignatureResult,
    compute_eventsub_signature,
    verify_eventsub_notification,
    verify_eventsub_signature,
)
from .validation import validate_subscription

__all__ = [
    "ApiErrorBody",
    "ApiFailure",
    "ApiSuccess",
    "DecodeError",
    "EventSubMessageType",
    "EventSubNotification",
    "EventSubSubscription",
    "EventSubSubscriptionRecord",
    "EventSubSubscriptionsParams",
    "EventSubTransport",
    "HelixClient",
    "HelixError",
    "HttpClientConfig",
    "HttpxRequestExecutor",
    "ManyEventSubSubscriptions",
    "RateLimit",
    "SignatureResult",
    "SubscriptionStatus",
    "TransportError",
    "ValidationError",
    "ValidationErrorKind",
    "compute_eventsub_signature",
    "create_helix_client",
    "shape_response",
    "validate_subscription",
    "verify_eventsub_notification",
    "verify_eventsub_signature",
]
