"""Protocolos e contratos do cliente."""

from .http_client import HttpRequest, HttpResponse, RequestExecutorProtocol

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "RequestExecutorProtocol",
]
