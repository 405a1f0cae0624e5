"""Testes do cliente HTTP do webhook n8n (transport httpx falso)."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from api.connectors.n8n import (
    HttpClientConfig,
    N8nWebhookClient,
    create_n8n_webhook_client,
    is_success_status,
    parse_response_body,
)
from config.settings import N8nSettings

URL = "https://n8n.example.com/webhook/auth-form"
PAYLOAD = {"event_type": "telegram_auth_form", "auth_level": 1}


def _client(handler) -> N8nWebhookClient:
    return create_n8n_webhook_client(
        N8nSettings(webhook_url=URL),
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_sends_json_with_fixed_headers() -> None:
    captured: dict[str, httpx.Request] = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, json={"received": True})

    result = await _client(_handler).send_event(URL, PAYLOAD)

    request = captured["request"]
    assert request.method == "POST"
    assert str(request.url) == URL
    assert request.headers["content-type"] == "application/json"
    assert request.headers["user-agent"] == "Telegram-Auth-Webhook/1.0"
    assert json.loads(request.content) == PAYLOAD
    assert result.success is True
    assert result.response == {"received": True}
    assert result.http_code == 200
    assert result.payload_size == len(request.content)


@pytest.mark.asyncio
async def test_non_json_success_body_is_raw_text() -> None:
    result = await _client(lambda _: httpx.Response(200, text="Workflow started")).send_event(
        URL, PAYLOAD
    )
    assert result.success is True
    assert result.response == "Workflow started"


@pytest.mark.asyncio
async def test_redirect_status_is_success_without_following() -> None:
    calls: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(302, headers={"location": "https://elsewhere.example.com"})

    result = await _client(_handler).send_event(URL, PAYLOAD)

    assert result.success is True
    assert result.http_code == 302
    assert len(calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 404, 500, 503])
async def test_error_status_is_failure(status_code: int) -> None:
    result = await _client(lambda _: httpx.Response(status_code, text="nope")).send_event(
        URL, PAYLOAD
    )
    assert result.success is False
    assert result.error == f"HTTP {status_code}"
    assert result.http_code == status_code
    assert result.raw_response == "nope"


@pytest.mark.asyncio
async def test_transport_error_becomes_result() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Could not resolve host", request=request)

    result = await _client(_handler).send_event(URL, PAYLOAD)

    assert result.success is False
    assert result.http_code == 0
    assert result.error == "Could not resolve host"
    assert result.payload_size > 0


@pytest.mark.asyncio
async def test_timeout_becomes_result() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    result = await _client(_handler).send_event(URL, PAYLOAD)

    assert result.success is False
    assert result.error == "timed out"


def test_factory_applies_settings() -> None:
    client = create_n8n_webhook_client(
        N8nSettings(webhook_url=URL, request_timeout_seconds=7.0, verify_ssl=False)
    )
    assert client.config == HttpClientConfig(
        timeout_seconds=7.0,
        default_headers={"User-Agent": "Telegram-Auth-Webhook/1.0"},
        verify_ssl=False,
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('{"a": 1}', {"a": 1}),
        ("[]", "[]"),
        ("null", "null"),
        ("", ""),
        ("OK", "OK"),
    ],
)
def test_parse_response_body(text: str, expected: object) -> None:
    assert parse_response_body(text) == expected


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [(199, False), (200, True), (204, True), (399, True), (400, False)],
)
def test_is_success_status(status_code: int, expected: bool) -> None:
    assert is_success_status(status_code) is expected


@pytest.mark.asyncio
async def test_non_finite_number_is_not_sent() -> None:
    calls: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    result = await _client(_handler).send_event(URL, {**PAYLOAD, "score": float("nan")})

    assert calls == []
    assert result.success is False
    assert result.error == "payload_not_serializable"
    assert result.http_code == 0


@pytest.mark.asyncio
async def test_timeout_bounds_the_whole_call() -> None:
    async def _slow_handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1.0)
        return httpx.Response(200)

    client = create_n8n_webhook_client(
        N8nSettings(webhook_url=URL, request_timeout_seconds=0.05),
        transport=httpx.MockTransport(_slow_handler),
    )

    result = await client.send_event(URL, PAYLOAD)

    assert result.success is False
    assert result.http_code == 0
    assert result.error == "Request timed out after 0.05s"
