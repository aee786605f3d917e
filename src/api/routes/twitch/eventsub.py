"""Endpoint de webhook EventSub.

Fluxo (POST):
1. Valida assinatura HMAC (Twitch-Eventsub-Message-Signature)
2. Decodifica o corpo como notificação EventSub
3. Responde conforme Twitch-Eventsub-Message-Type:
   - webhook_callback_verification: devolve o challenge em texto puro
   - notification: 204 e despacha o handler em background
   - revocation: 204 e registra o motivo
   - tipo ausente ou desconhecido: 204, registrado como eventsub_message_type_unknown

Segurança:
- Assinatura sempre obrigatória (sem secret, toda entrega é rejeitada)
- Resposta rápida para evitar reentrega pela plataforma
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, BackgroundTasks, Request, Response, status

from api.connectors.twitch.models import EventSubMessageType, EventSubNotification
from api.connectors.twitch.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_eventsub_request,
)
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_twitch_settings

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[EventSubNotification], Awaitable[None]]


async def _dispatch_notification_safe(
    handler: NotificationHandler,
    notification: EventSubNotification,
    correlation_id: str,
) -> None:
    """Executa o handler em background sem propagar exceções."""
    token = set_correlation_id(correlation_id)
    try:
        await handler(notification)
    except Exception:
        logger.exception(
            "eventsub_handler_failed",
            extra={"subscription_type": notification.subscription.type},
        )
    finally:
        reset_correlation_id(token)


def create_eventsub_router(
    secret: str | None = None,
    on_notification: NotificationHandler | None = None,
) -> APIRouter:
    """Cria o router de webhook EventSub.

    Args:
        secret: Secret usado na criação das subscriptions. Se None, usa
            TwitchSettings.webhook_secret carregado do ambiente.
        on_notification: Handler assíncrono para entregas do tipo notification

    Returns:
        APIRouter com POST "/" registrado
    """
    webhook_secret = secret if secret is not None else get_twitch_settings().webhook_secret
    if not webhook_secret:
        logger.warning("eventsub_secret_missing", extra={"effect": "all_deliveries_rejected"})

    router = APIRouter()

    @router.post("/", response_model=None)
    async def receive_eventsub(request: Request, background_tasks: BackgroundTasks) -> Response:
        raw_body = await request.body()
        headers = dict(request.headers)
        token = set_correlation_id(headers.get("twitch-eventsub-message-id"))

        try:
            try:
                delivery = parse_eventsub_request(raw_body, headers, webhook_secret)
            except InvalidSignatureError as exc:
                logger.warning("eventsub_signature_invalid", extra={"error": str(exc)})
                return Response(
                    content="Unauthorized",
                    media_type="text/plain",
                    status_code=status.HTTP_401_UNAUTHORIZED,
                )
            except InvalidJsonError as exc:
                logger.warning("eventsub_json_invalid", extra={"error": str(exc)})
                return Response(
                    content="Bad Request",
                    media_type="text/plain",
                    status_code=status.HTTP_400_BAD_REQUEST,
                )

            notification = delivery.notification
            log_extra = {
                "message_type": delivery.message_type,
                "subscription_type": notification.subscription.type,
                "subscription_status": notification.subscription.status,
            }

            if delivery.message_type == EventSubMessageType.VERIFICATION:
                logger.info("eventsub_callback_verified", extra=log_extra)
                return Response(
                    content=notification.challenge or "",
                    media_type="text/plain",
                    status_code=status.HTTP_200_OK,
                )

            if delivery.message_type == EventSubMessageType.REVOCATION:
                logger.warning("eventsub_subscription_revoked", extra=log_extra)
                return Response(status_code=status.HTTP_204_NO_CONTENT)

            if delivery.message_type != EventSubMessageType.NOTIFICATION:
                logger.warning("eventsub_message_type_unknown", extra=log_extra)
                return Response(status_code=status.HTTP_204_NO_CONTENT)

            logger.info("eventsub_notification_received", extra=log_extra)
            if on_notification is not None:
                background_tasks.add_task(
                    _dispatch_notification_safe,
                    on_notification,
                    notification,
                    get_correlation_id(),
                )
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        finally:
            reset_correlation_id(token)

    return router
