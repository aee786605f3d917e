"""Rotas HTTP: adapters de entrada.

Estrutura:
- routes/twitch/: webhook EventSub (verificação, notificação, revogação)
"""

from __future__ import annotations

from api.routes.twitch import create_eventsub_router

__all__ = ["create_eventsub_router"]
