"""Connectors por plataforma: adapters de borda para APIs externas.

Estrutura:
- twitch/: Helix API (EventSub subscriptions) e webhooks EventSub
"""

__all__: list[str] = []
