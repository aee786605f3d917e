"""Modelos da API EventSub (requisições, registros e notificações).

Os modelos de requisição são imutáveis; os de resposta ignoram campos
desconhecidos para tolerar evolução do contrato da plataforma.
"""

from __future__ import annotations

import re
from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# A Twitch envia timestamps com nanossegundos; datetime guarda microssegundos
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


class SubscriptionStatus(StrEnum):
    """Status conhecidos de uma subscription EventSub."""

    ENABLED = "enabled"
    VERIFICATION_PENDING = "webhook_callback_verification_pending"
    VERIFICATION_FAILED = "webhook_callback_verification_failed"
    NOTIFICATION_FAILURES_EXCEEDED = "notification_failures_exceeded"
    AUTHORIZATION_REVOKED = "authorization_revoked"
    USER_REMOVED = "user_removed"
    VERSION_REMOVED = "version_removed"


class EventSubMessageType(StrEnum):
    """Valores do header Twitch-Eventsub-Message-Type."""

    VERIFICATION = "webhook_callback_verification"
    NOTIFICATION = "notification"
    REVOCATION = "revocation"


class EventSubTransport(BaseModel):
    """Transporte de uma nova subscription (webhook + callback + secret)."""

    model_config = ConfigDict(frozen=True)

    method: Literal["webhook"] = "webhook"
    callback: str = Field(..., description="URL que recebe as notificações.")
    secret: str = Field(..., description="Secret usado para assinar as entregas.")


class EventSubSubscription(BaseModel):
    """Requisição de criação de subscription."""

    model_config = ConfigDict(frozen=True)

    type: str
    version: str
    condition: dict[str, str] = Field(default_factory=dict)
    transport: EventSubTransport


class EventSubTransportRecord(BaseModel):
    """Transporte devolvido pelo servidor (o secret nunca é ecoado)."""

    model_config = ConfigDict(extra="ignore")

    method: str = "webhook"
    callback: str = ""


class EventSubSubscriptionRecord(BaseModel):
    """Subscription registrada no servidor."""

    model_config = ConfigDict(extra="ignore")

    id: str
    status: str
    type: str
    version: str
    condition: dict[str, str] = Field(default_factory=dict)
    transport: EventSubTransportRecord = Field(default_factory=EventSubTransportRecord)
    created_at: datetime
    cost: int = 0

    @field_validator("created_at", mode="before")
    @classmethod
    def truncate_nanoseconds(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _FRACTION_RE.sub(r"\1", value, count=1)
        return value


class Pagination(BaseModel):
    """Cursor de paginação da Helix API."""

    model_config = ConfigDict(extra="ignore")

    cursor: str = ""


class ManyEventSubSubscriptions(BaseModel):
    """Payload de sucesso dos endpoints de subscription."""

    model_config = ConfigDict(extra="ignore")

    data: list[EventSubSubscriptionRecord] = Field(default_factory=list)
    total: int = 0
    total_cost: int = 0
    max_total_cost: int = 0
    limit: int = 0
    pagination: Pagination = Field(default_factory=Pagination)


class EventSubSubscriptionsParams(BaseModel):
    """Filtros opcionais da listagem de subscriptions."""

    model_config = ConfigDict(frozen=True)

    status: str | None = None
    type: str | None = None
    user_id: str | None = None
    after: str | None = None

    def to_query(self) -> dict[str, str]:
        """Retorna apenas os filtros preenchidos."""
        return {key: value for key, value in self.model_dump().items() if value}


class EventSubNotification(BaseModel):
    """Corpo de uma entrega EventSub (verificação, notificação ou revogação)."""

    model_config = ConfigDict(extra="ignore")

    subscription: EventSubSubscriptionRecord
    challenge: str | None = None
    event: dict[str, Any] | None = None


__all__ = [
    "EventSubMessageType",
    "EventSubNotification",
    "EventSubSubscription",
    "EventSubSubscriptionRecord",
    "EventSubSubscriptionsParams",
    "EventSubTransport",
    "EventSubTransportRecord",
    "ManyEventSubSubscriptions",
    "Pagination",
    "SubscriptionStatus",
]
