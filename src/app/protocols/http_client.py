"""Protocolos HTTP usados pelo cliente Helix.

Evita dependência direta de uma biblioteca HTTP concreta: o cliente só
conhece o contrato `execute(request) -> response`, o que permite trocar
o transporte por fakes determinísticos nos testes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class HttpRequest:
    """Requisição HTTP já serializada."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class HttpResponse:
    """Resposta HTTP bruta (status, headers e corpo em bytes)."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class RequestExecutorProtocol(Protocol):
    """Contrato mínimo para execução de requisições HTTP.

    Implementações devem levantar TransportError quando a chamada não
    puder ser concluída (DNS, conexão recusada, timeout).
    """

    async def execute(self, request: HttpRequest) -> HttpResponse: ...
