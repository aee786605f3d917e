"""Rotas Twitch (webhook EventSub)."""

from api.routes.twitch.eventsub import NotificationHandler, create_eventsub_router

__all__ = ["NotificationHandler", "create_eventsub_router"]
