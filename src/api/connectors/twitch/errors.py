"""Erros do conector Twitch Helix.

Taxonomia:
- ValidationError: checagem local, antes de qualquer chamada de rede
- TransportError: a requisição não pôde ser concluída
- DecodeError: payload mal-formado onde um payload válido era esperado

Erros de API (status fora de 2xx) não são exceções: chegam como
ApiFailure dentro do envelope de resposta.
"""

from __future__ import annotations

from enum import StrEnum


class HelixError(Exception):
    """Erro base do conector Helix."""


class ValidationErrorKind(StrEnum):
    """Tipos de falha de validação local."""

    INVALID_SECRET_LENGTH = "InvalidSecretLength"
    INSECURE_CALLBACK = "InsecureCallback"


class ValidationError(HelixError):
    """Requisição de subscription rejeitada localmente."""

    def __init__(self, kind: ValidationErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class TransportError(HelixError):
    """Falha ao executar a requisição HTTP (nenhuma resposta recebida)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to execute API request: {reason}")
        self.reason = reason


class DecodeError(HelixError):
    """Corpo de resposta mal-formado."""
