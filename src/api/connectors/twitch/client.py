"""Cliente Helix para o recurso EventSub subscriptions.

Operações:
- get_eventsub_subscriptions: lista subscriptions (com filtros opcionais)
- create_eventsub_subscription: valida localmente e cria a subscription
- remove_eventsub_subscription: remove uma subscription por ID

Contrato de erros:
- ValidationError: requisição rejeitada antes de qualquer chamada de rede
- TransportError: a requisição não chegou a receber resposta
- DecodeError: resposta mal-formada
- Erros da API (status fora de 2xx) voltam como ApiFailure, não exceção
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import httpx

from api.connectors.twitch.helix_logging import (
    log_api_error,
    log_success,
    log_validation_rejected,
)
from api.connectors.twitch.http_base import HttpClientConfig, HttpxRequestExecutor
from api.connectors.twitch.models import (
    EventSubSubscription,
    EventSubSubscriptionsParams,
    ManyEventSubSubscriptions,
)
from api.connectors.twitch.response import ApiFailure, ApiResponse, shape_response
from api.connectors.twitch.validation import validate_subscription
from app.protocols.http_client import HttpRequest

if TYPE_CHECKING:
    from app.protocols.http_client import RequestExecutorProtocol
    from config.settings import TwitchSettings

logger: logging.Logger = logging.getLogger(__name__)

SubscriptionsResponse = ApiResponse[ManyEventSubSubscriptions]


class HelixClient:
    """Cliente tipado para os endpoints EventSub da Helix API.

    Toda configuração chega pelo construtor; nenhum estado global é lido.
    """

    def __init__(
        self,
        settings: TwitchSettings,
        executor: RequestExecutorProtocol | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            settings: Client ID, token, URL base e timeout
            executor: Transporte HTTP. Usa httpx quando None.
        """
        self._settings = settings
        self._executor = executor or HttpxRequestExecutor(
            HttpClientConfig(timeout_seconds=settings.request_timeout_seconds)
        )

    async def get_eventsub_subscriptions(
        self,
        params: EventSubSubscriptionsParams | None = None,
    ) -> SubscriptionsResponse:
        """Lista as subscriptions EventSub da aplicação."""
        query = (params or EventSubSubscriptionsParams()).to_query()
        url = self._build_url(query)
        return await self._send("GET", url)

    async def create_eventsub_subscription(
        self,
        subscription: EventSubSubscription,
    ) -> SubscriptionsResponse:
        """Cria uma subscription EventSub.

        Raises:
            ValidationError: Se o secret ou o callback forem inválidos
        """
        error = validate_subscription(subscription)
        if error is not None:
            log_validation_rejected(error.kind, subscription.type)
            raise error

        body = json.dumps(subscription.model_dump(mode="json")).encode("utf-8")
        return await self._send("POST", self._build_url(), body=body)

    async def remove_eventsub_subscription(self, subscription_id: str) -> SubscriptionsResponse:
        """Remove uma subscription pelo ID (204 em caso de sucesso)."""
        url = self._build_url({"id": subscription_id})
        return await self._send("DELETE", url)

    def _build_url(self, query: dict[str, str] | None = None) -> str:
        endpoint = self._settings.eventsub_subscriptions_endpoint
        if not query:
            return endpoint
        return str(httpx.URL(endpoint, params=query))

    def _build_headers(self, has_body: bool) -> dict[str, str]:
        headers = {"Client-Id": self._settings.client_id}
        if self._settings.access_token:
            headers["Authorization"] = f"Bearer {self._settings.access_token}"
        if self._settings.user_agent:
            headers["User-Agent"] = self._settings.user_agent
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def _send(self, method: str, url: str, body: bytes = b"") -> SubscriptionsResponse:
        request = HttpRequest(
            method=method,
            url=url,
            headers=self._build_headers(has_body=bool(body)),
            body=body,
        )
        endpoint = self._settings.eventsub_subscriptions_endpoint

        response = await self._executor.execute(request)
        result = shape_response(
            response.status_code,
            response.body,
            ManyEventSubSubscriptions,
            response.headers,
        )

        if isinstance(result, ApiFailure):
            log_api_error(result, method, endpoint)
        else:
            log_success(method, endpoint, result.status_code)
        return result


def create_helix_client(
    settings: TwitchSettings | None = None,
    executor: RequestExecutorProtocol | None = None,
) -> HelixClient:
    """Factory para criar cliente Helix com config padrão.

    Args:
        settings: TwitchSettings opcional. Se None, carrega do ambiente.
        executor: Transporte HTTP opcional.

    Returns:
        Cliente Helix configurado.
    """
    # Import local para evitar dependência circular
    from config.settings import get_twitch_settings

    twitch = settings or get_twitch_settings()
    for problem in twitch.validate():
        logger.warning("twitch_settings_invalid", extra={"problem": problem})
    return HelixClient(twitch, executor=executor)
