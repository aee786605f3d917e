"""Envelope de resposta da Helix API.

Toda chamada devolve exatamente uma das variantes:
- ApiSuccess: status 2xx, payload decodificado
- ApiFailure: status fora de 2xx, campos de erro da plataforma

Falhas de decodificação levantam DecodeError; nunca viram envelope vazio.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from api.connectors.twitch.errors import DecodeError

if TYPE_CHECKING:
    from collections.abc import Mapping

PayloadT = TypeVar("PayloadT", bound=BaseModel)

RATE_LIMIT_HEADERS = ("ratelimit-limit", "ratelimit-remaining", "ratelimit-reset")


class ApiErrorBody(BaseModel):
    """Corpo de erro: {"error": ..., "status": ..., "message": ...}."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    error: str
    status: int
    message: str = ""


@dataclass(frozen=True)
class RateLimit:
    """Headers de rate limit da Helix API."""

    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None


def _parse_rate_limit(headers: Mapping[str, str]) -> RateLimit:
    lowered = {key.lower(): value for key, value in headers.items()}
    values: list[int | None] = []
    for name in RATE_LIMIT_HEADERS:
        raw = lowered.get(name)
        values.append(int(raw) if raw is not None and raw.isdigit() else None)
    return RateLimit(*values)


@dataclass(frozen=True)
class ApiSuccess(Generic[PayloadT]):
    """Resposta 2xx com payload decodificado."""

    status_code: int
    data: PayloadT
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def rate_limit(self) -> RateLimit:
        return _parse_rate_limit(self.headers)


@dataclass(frozen=True)
class ApiFailure:
    """Resposta fora de 2xx; erro da API tratado como dado."""

    status_code: int
    error: ApiErrorBody
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def rate_limit(self) -> RateLimit:
        return _parse_rate_limit(self.headers)


ApiResponse = ApiSuccess[PayloadT] | ApiFailure


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def shape_response(
    status_code: int,
    body: bytes,
    payload_model: type[PayloadT],
    headers: Mapping[str, str] | None = None,
) -> ApiResponse[PayloadT]:
    """Converte uma resposta HTTP bruta no envelope tipado.

    Args:
        status_code: Status HTTP recebido
        body: Corpo bruto
        payload_model: Modelo esperado em caso de sucesso
        headers: Headers da resposta

    Raises:
        DecodeError: Se o corpo não corresponder ao formato esperado

    Returns:
        ApiSuccess ou ApiFailure
    """
    response_headers = dict(headers or {})

    if is_success_status(status_code):
        if not body.strip():
            return ApiSuccess(status_code, payload_model(), response_headers)
        return ApiSuccess(status_code, _decode(body, payload_model), response_headers)

    if not body.strip():
        error = ApiErrorBody(error=_reason_phrase(status_code), status=status_code)
    else:
        error = _decode(body, ApiErrorBody)
    return ApiFailure(status_code, error, response_headers)


def _decode(body: bytes, model: type[PayloadT]) -> PayloadT:
    try:
        return model.model_validate_json(body)
    except PydanticValidationError as exc:
        raise DecodeError(f"failed to decode API response: {_summarize(exc)}") from exc


def _summarize(exc: PydanticValidationError) -> str:
    first = exc.errors()[0] if exc.errors() else {}
    if first.get("type") == "json_invalid":
        return "invalid_json"
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{first.get('type', 'invalid')} at {location or 'body'}"


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown Error"


__all__ = [
    "ApiErrorBody",
    "ApiFailure",
    "ApiResponse",
    "ApiSuccess",
    "RateLimit",
    "is_success_status",
    "shape_response",
]
