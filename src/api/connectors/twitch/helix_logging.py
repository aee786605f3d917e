"""Helpers de logging para a Helix API (sem tokens nem secrets)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .response import ApiFailure

logger = logging.getLogger(__name__)


def log_api_error(
    failure: ApiFailure,
    method: str,
    endpoint: str,
) -> None:
    """Loga erro da Helix sem expor dados sensíveis."""
    logger.warning(
        "helix_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": failure.status_code,
            "error_name": failure.error.error,
            "error_message": failure.error.message,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "helix_api_success",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )


def log_validation_rejected(kind: str, subscription_type: str) -> None:
    """Loga subscription rejeitada localmente (antes da rede)."""
    logger.info(
        "eventsub_subscription_rejected",
        extra={
            "validation_kind": kind,
            "subscription_type": subscription_type,
        },
    )
