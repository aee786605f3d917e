"""correlation_id por contexto, injetado nos logs pelo CorrelationIdFilter.

No webhook EventSub o valor é o Twitch-Eventsub-Message-Id, o que liga
todos os logs de uma entrega (inclusive o handler em background).
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id atual (string vazia se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um UUID v4 quando None ou vazio.

    Returns:
        Token para reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
