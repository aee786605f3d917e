"""Agregador de settings do cliente Helix/EventSub."""

from __future__ import annotations

from config.settings.twitch import (
    EVENTSUB_SUBSCRIPTIONS_PATH,
    HELIX_API_BASE_URL,
    TwitchSettings,
    get_twitch_settings,
)

__all__ = [
    "EVENTSUB_SUBSCRIPTIONS_PATH",
    "HELIX_API_BASE_URL",
    "TwitchSettings",
    "get_twitch_settings",
]
