"""Testes do HelixClient com executor fake (sem rede)."""

from __future__ import annotations

import json
import typing

import pytest

from api.connectors.twitch.client import HelixClient, SubscriptionsResponse, create_helix_client
from api.connectors.twitch.errors import TransportError, ValidationError, ValidationErrorKind
from api.connectors.twitch.models import (
    EventSubSubscription,
    EventSubSubscriptionsParams,
    EventSubTransport,
    ManyEventSubSubscriptions,
    SubscriptionStatus,
)
from api.connectors.twitch.response import ApiFailure, ApiSuccess
from config.settings import TwitchSettings
from tests.fakes.fake_request_executor import FailingRequestExecutor, FakeRequestExecutor

SETTINGS = TwitchSettings(client_id="my-client-id", access_token="app-token")

UNAUTHORIZED = '{"error":"Unauthorized","status":401,"message":"OAuth token is missing"}'

CREATED = (
    '{"data":[{"id":"4d06fabc-4cf4-4e99-a60f-b457d5c69305","status":"webhook_callback_verification_pending",'
    '"type":"channel.follow","version":"1","condition":{"broadcaster_user_id":"12345678"},'
    '"created_at":"2021-03-10T23:38:50.311154721Z","transport":{"method":"webhook",'
    '"callback":"https://example.com/eventsub/follow"},"cost":1}],"limit":10000,"total":1,'
    '"max_total_cost":10000,"total_cost":1}'
)


def _subscription(secret: str = "s3cr37w0rd", callback: str = "https://example.com/eventsub/follow") -> EventSubSubscription:
    return EventSubSubscription(
        type="channel.follow",
        version="1",
        condition={"broadcaster_user_id": "12345678"},
        transport=EventSubTransport(callback=callback, secret=secret),
    )


class TestGetEventSubSubscriptions:
    """Testes para listagem de subscriptions."""

    @pytest.mark.asyncio
    async def test_unauthorized(self) -> None:
        client = HelixClient(SETTINGS, FakeRequestExecutor(401, UNAUTHORIZED))

        result = await client.get_eventsub_subscriptions()

        assert isinstance(result, ApiFailure)
        assert result.status_code == 401
        assert result.error.error == "Unauthorized"
        assert result.error.message == "OAuth token is missing"

    @pytest.mark.asyncio
    async def test_filtered_list(self) -> None:
        body = '{"total":1,"data":[],"limit":100000000,"max_total_cost":10000,"total_cost":1,"pagination":{}}'
        executor = FakeRequestExecutor(200, body)
        client = HelixClient(SETTINGS, executor)

        result = await client.get_eventsub_subscriptions(
            EventSubSubscriptionsParams(status=SubscriptionStatus.VERIFICATION_FAILED)
        )

        assert isinstance(result, ApiSuccess)
        assert result.data.data == []
        assert result.data.total == 1
        request = executor.requests[0]
        assert request.method == "GET"
        assert request.url == (
            "https://api.twitch.tv/helix/eventsub/subscriptions"
            "?status=webhook_callback_verification_failed"
        )

    @pytest.mark.asyncio
    async def test_sends_auth_headers(self) -> None:
        executor = FakeRequestExecutor(200, '{"data":[]}')
        client = HelixClient(SETTINGS, executor)

        await client.get_eventsub_subscriptions()

        request = executor.requests[0]
        assert request.url == "https://api.twitch.tv/helix/eventsub/subscriptions"
        assert request.headers["Client-Id"] == "my-client-id"
        assert request.headers["Authorization"] == "Bearer app-token"
        assert "Content-Type" not in request.headers
        assert request.body == b""

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        client = HelixClient(SETTINGS, FailingRequestExecutor())

        with pytest.raises(TransportError) as exc_info:
            await client.get_eventsub_subscriptions()

        assert str(exc_info.value) == "failed to execute API request: Oops, that's bad :("


class TestCreateEventSubSubscription:
    """Testes para criação de subscriptions."""

    @pytest.mark.asyncio
    async def test_short_secret_fails_before_network(self) -> None:
        executor = FakeRequestExecutor(200, CREATED)
        client = HelixClient(SETTINGS, executor)

        with pytest.raises(ValidationError) as exc_info:
            await client.create_eventsub_subscription(_subscription(secret="111"))

        assert exc_info.value.kind == ValidationErrorKind.INVALID_SECRET_LENGTH
        assert str(exc_info.value) == "secret must be between 10 and 100 characters"
        assert executor.requests == []

    @pytest.mark.asyncio
    async def test_http_callback_fails_before_network(self) -> None:
        executor = FakeRequestExecutor(200, CREATED)
        client = HelixClient(SETTINGS, executor)

        with pytest.raises(ValidationError) as exc_info:
            await client.create_eventsub_subscription(
                _subscription(callback="http://example.com/eventsub/follow")
            )

        assert exc_info.value.kind == ValidationErrorKind.INSECURE_CALLBACK
        assert executor.requests == []

    @pytest.mark.asyncio
    async def test_conflict_is_returned_not_raised(self) -> None:
        body = '{"error":"Conflict","status":409,"message":"subscription already exists"}'
        client = HelixClient(SETTINGS, FakeRequestExecutor(409, body))

        result = await client.create_eventsub_subscription(_subscription())

        assert isinstance(result, ApiFailure)
        assert result.error.error == "Conflict"
        assert result.error.status == 409
        assert result.error.message == "subscription already exists"

    @pytest.mark.asyncio
    async def test_created(self) -> None:
        executor = FakeRequestExecutor(202, CREATED)
        client = HelixClient(SETTINGS, executor)

        result = await client.create_eventsub_subscription(_subscription())

        assert isinstance(result, ApiSuccess)
        assert len(result.data.data) == 1
        record = result.data.data[0]
        assert record.transport.method == "webhook"
        assert record.status == SubscriptionStatus.VERIFICATION_PENDING

        request = executor.requests[0]
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        sent = json.loads(request.body)
        assert sent == {
            "type": "channel.follow",
            "version": "1",
            "condition": {"broadcaster_user_id": "12345678"},
            "transport": {
                "method": "webhook",
                "callback": "https://example.com/eventsub/follow",
                "secret": "s3cr37w0rd",
            },
        }


class TestRemoveEventSubSubscription:
    """Testes para remoção de subscriptions."""

    @pytest.mark.asyncio
    async def test_no_content(self) -> None:
        executor = FakeRequestExecutor(204, "")
        client = HelixClient(SETTINGS, executor)

        result = await client.remove_eventsub_subscription("832389eb-0d0b-41f8-b564-da039f6c4c75")

        assert isinstance(result, ApiSuccess)
        assert result.status_code == 204
        assert result.data.data == []
        request = executor.requests[0]
        assert request.method == "DELETE"
        assert request.url.endswith("/eventsub/subscriptions?id=832389eb-0d0b-41f8-b564-da039f6c4c75")

    @pytest.mark.asyncio
    async def test_bad_request(self) -> None:
        body = '{"error":"Bad Request","status":400,"message":"Missing required parameter \\"id\\""}'
        client = HelixClient(SETTINGS, FakeRequestExecutor(400, body))

        result = await client.remove_eventsub_subscription("")

        assert isinstance(result, ApiFailure)
        assert result.error.error == "Bad Request"
        assert result.error.message == 'Missing required parameter "id"'

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        client = HelixClient(SETTINGS, FailingRequestExecutor("connection refused"))

        with pytest.raises(TransportError, match="failed to execute API request: connection refused"):
            await client.remove_eventsub_subscription("832389eb-0d0b-41f8-b564-da039f6c4c75")


def test_create_helix_client_with_explicit_settings() -> None:
    settings = TwitchSettings(client_id="id", api_base_url="https://helix.example.com/")
    executor = FakeRequestExecutor()

    client = create_helix_client(settings, executor=executor)

    assert isinstance(client, HelixClient)
    assert settings.eventsub_subscriptions_endpoint == "https://helix.example.com/eventsub/subscriptions"


def test_subscriptions_response_is_the_shared_envelope() -> None:
    assert set(typing.get_args(SubscriptionsResponse)) == {
        ApiSuccess[ManyEventSubSubscriptions],
        ApiFailure,
    }
