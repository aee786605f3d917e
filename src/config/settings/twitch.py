"""Settings específicas da Twitch (Helix + EventSub).

Configurações do cliente Helix e do receptor de webhooks EventSub.
As settings são imutáveis e passadas explicitamente aos construtores;
o carregamento via ambiente é usado apenas pelas factories.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Helix API
HELIX_API_BASE_URL: str = "https://api.twitch.tv/helix"
EVENTSUB_SUBSCRIPTIONS_PATH: str = "/eventsub/subscriptions"


@dataclass(frozen=True)
class TwitchSettings:
    """Configurações do cliente Twitch.

    Attributes:
        client_id: Client ID da aplicação registrada na Twitch
        access_token: App access token (Bearer) para a Helix API
        webhook_secret: Secret usado para assinar entregas EventSub
        api_base_url: URL base da Helix API
        request_timeout_seconds: Timeout para requisições HTTP
        user_agent: User-Agent opcional enviado em cada requisição
    """

    client_id: str = ""
    access_token: str = ""
    webhook_secret: str = ""

    api_base_url: str = HELIX_API_BASE_URL
    request_timeout_seconds: float = 10.0
    user_agent: str = ""

    @property
    def eventsub_subscriptions_endpoint(self) -> str:
        """URL completa do recurso de subscriptions EventSub."""
        return f"{self.api_base_url.rstrip('/')}{EVENTSUB_SUBSCRIPTIONS_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do cliente.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.client_id:
            errors.append("TWITCH_CLIENT_ID não configurado")

        if not self.webhook_secret:
            errors.append("TWITCH_EVENTSUB_SECRET não configurado")

        if not self.api_base_url.startswith("https://"):
            errors.append("TWITCH_API_BASE_URL deve usar https")

        if self.request_timeout_seconds <= 0:
            errors.append("TWITCH_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> TwitchSettings:
    """Carrega TwitchSettings a partir de variáveis de ambiente."""
    return TwitchSettings(
        client_id=os.getenv("TWITCH_CLIENT_ID", ""),
        access_token=os.getenv("TWITCH_ACCESS_TOKEN", ""),
        webhook_secret=os.getenv("TWITCH_EVENTSUB_SECRET", ""),
        api_base_url=os.getenv("TWITCH_API_BASE_URL", HELIX_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("TWITCH_REQUEST_TIMEOUT_SECONDS", "10")),
        user_agent=os.getenv("TWITCH_USER_AGENT", ""),
    )


@lru_cache(maxsize=1)
def get_twitch_settings() -> TwitchSettings:
    """Retorna instância cacheada de TwitchSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
