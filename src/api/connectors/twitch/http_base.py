"""Executor HTTP baseado em httpx para o cliente Helix.

Não aplica retry nem backoff: qualquer falha de transporte vira
TransportError com a causa original encadeada.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from api.connectors.twitch.errors import TransportError
from app.protocols.http_client import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do executor HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpxRequestExecutor:
    """Executa HttpRequest com httpx.AsyncClient."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def execute(self, request: HttpRequest) -> HttpResponse:
        merged_headers = {**self._config.default_headers, **request.headers}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    request.method,
                    request.url,
                    content=request.body or None,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(
                "http_request_failed",
                extra={
                    "method": request.method,
                    "error_type": type(exc).__name__,
                },
            )
            raise TransportError(str(exc) or type(exc).__name__) from exc

        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )
