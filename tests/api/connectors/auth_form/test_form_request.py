"""Testes do parse do corpo e do contexto do request do formulário."""

from __future__ import annotations

import pytest
from starlette.requests import Request

from api.connectors.auth_form import (
    InvalidJsonError,
    build_request_context,
    parse_form_submission,
)


def _build_request(headers: dict[str, str], client: tuple[str, int] | None) -> Request:
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": "POST",
        "scheme": "https",
        "path": "/webhook/auth-form",
        "raw_path": b"/webhook/auth-form",
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
        "client": client,
        "server": ("relay.example.com", 443),
    }
    return Request(scope)


class TestParseFormSubmission:
    def test_valid_object(self) -> None:
        assert parse_form_submission(b'{"level": 1}') == {"level": 1}

    @pytest.mark.parametrize(
        ("raw_body", "reason"),
        [
            (b"", "empty_body"),
            (b"   ", "empty_body"),
            (b"{not json", "invalid_json"),
            (b'{"level": NaN}', "invalid_json"),
            (b'{"level": 1, "size": Infinity}', "invalid_json"),
            (b'{"level": -Infinity}', "invalid_json"),
            (b"\xff\xfe", "invalid_json"),
            (b"{}", "empty_object"),
            (b"[1, 2]", "payload_not_object"),
            (b"null", "payload_not_object"),
            (b'"text"', "payload_not_object"),
        ],
    )
    def test_invalid_bodies(self, raw_body: bytes, reason: str) -> None:
        with pytest.raises(InvalidJsonError, match=reason):
            parse_form_submission(raw_body)


class TestBuildRequestContext:
    def test_extracts_headers_and_client(self) -> None:
        request = _build_request(
            {
                "Host": "relay.example.com",
                "User-Agent": "TelegramWebView/10.0",
                "X-Forwarded-For": "198.51.100.1",
                "Client-IP": "198.51.100.2",
            },
            client=("10.0.0.5", 51000),
        )

        context = build_request_context(request)

        assert context.forwarded_for == "198.51.100.1"
        assert context.client_ip == "198.51.100.2"
        assert context.remote_addr == "10.0.0.5"
        assert context.user_agent == "TelegramWebView/10.0"
        assert context.scheme == "https"
        assert context.host == "relay.example.com"

    def test_missing_client_and_headers(self) -> None:
        context = build_request_context(_build_request({}, client=None))

        assert context.remote_addr is None
        assert context.user_agent is None
        assert context.resolve_ip() == "unknown"
        assert context.resolve_user_agent() == "unknown"
