"""Bootstrap do serviço: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e monta a aplicação ASGI com o webhook EventSub.

Uso (produção):
    uvicorn app.bootstrap:create_app --factory --host 0.0.0.0 --port 8080

Uso (embutido):
    from app.bootstrap import create_app

    app = create_app(on_notification=handle_follow)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes.twitch import create_eventsub_router
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_twitch_settings

if TYPE_CHECKING:
    from api.routes.twitch import NotificationHandler
    from config.settings import TwitchSettings

# Nome do serviço para logs
SERVICE_NAME = "helix_eventsub"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

EVENTSUB_WEBHOOK_PREFIX = "/webhook/twitch/eventsub"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(settings: TwitchSettings) -> list[str]:
    """Valida settings no startup, apenas registrando os problemas."""
    errors = settings.validate()
    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    return errors


def create_app(
    on_notification: NotificationHandler | None = None,
    settings: TwitchSettings | None = None,
) -> FastAPI:
    """Cria a aplicação FastAPI com o webhook EventSub registrado.

    Args:
        on_notification: Handler assíncrono para entregas do tipo notification
        settings: Settings explícitas. Se None, carrega do ambiente.

    Returns:
        FastAPI com POST em EVENTSUB_WEBHOOK_PREFIX
    """
    initialize_app()
    settings = settings or get_twitch_settings()
    validate_runtime_settings(settings)

    app = FastAPI(title=SERVICE_NAME)
    app.include_router(
        create_eventsub_router(settings.webhook_secret, on_notification),
        prefix=EVENTSUB_WEBHOOK_PREFIX,
        tags=["twitch"],
    )
    return app
