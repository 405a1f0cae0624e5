"""Fluxo ponta a ponta: app FastAPI -> relay -> n8n (transport falso).

Usa o wiring real (create_relay_use_case) com storage e log de debug
em diretório temporário.
"""

from __future__ import annotations

import base64
import json
from pathlib import Path
from urllib.parse import urlparse

import httpx
import pytest
from fastapi.testclient import TestClient

from api.connectors.n8n import create_n8n_webhook_client
from app.app import create_app
from app.bootstrap import get_relay_use_case
from app.bootstrap.dependencies import create_relay_use_case
from config.settings import N8nSettings, StorageSettings, get_storage_settings

WEBHOOK_URL = "https://n8n.example.com/webhook/auth-form"
IMAGE_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 200


@pytest.fixture
def storage_settings(tmp_path: Path) -> StorageSettings:
    return StorageSettings(
        uploads_dir=str(tmp_path / "uploads"),
        debug_log_path=str(tmp_path / "webhook_log.txt"),
    )


@pytest.fixture
def n8n_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def test_client(
    monkeypatch: pytest.MonkeyPatch,
    storage_settings: StorageSettings,
    n8n_requests: list[httpx.Request],
) -> TestClient:
    monkeypatch.setenv("UPLOADS_DIR", storage_settings.uploads_dir)
    get_storage_settings.cache_clear()
    Path(storage_settings.uploads_dir).mkdir(parents=True)

    def _n8n(request: httpx.Request) -> httpx.Response:
        n8n_requests.append(request)
        return httpx.Response(200, json={"status": "accepted"})

    n8n_settings = N8nSettings(webhook_url=WEBHOOK_URL, inline_selfie_max_chars=100)
    use_case = create_relay_use_case(
        n8n_settings=n8n_settings,
        storage_settings=storage_settings,
        webhook_client=create_n8n_webhook_client(
            n8n_settings, transport=httpx.MockTransport(_n8n)
        ),
    )

    fastapi_app = create_app()
    fastapi_app.dependency_overrides[get_relay_use_case] = lambda: use_case
    yield TestClient(fastapi_app)
    get_storage_settings.cache_clear()


def test_level_two_submission_with_saved_selfie(
    test_client: TestClient,
    storage_settings: StorageSettings,
    n8n_requests: list[httpx.Request],
) -> None:
    selfie = "data:image/png;base64," + base64.b64encode(IMAGE_BYTES).decode()
    submission = {
        "level": 2,
        "action": "authentication_level_2",
        "form_data": {"first_name": "A", "last_name": "B", "phone": "09123456789"},
        "telegram_user": {"telegram_id": 123456789},
        "selfie_photo": selfie,
    }

    response = test_client.post(
        "/webhook/auth-form",
        json=submission,
        headers={"User-Agent": "TelegramWebView/10.0", "X-Forwarded-For": "198.51.100.9"},
    )

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["n8n_response"] == {"status": "accepted"}
    assert response.headers["access-control-allow-origin"] == "*"

    sent = json.loads(n8n_requests[0].content)
    assert sent["auth_level"] == 2
    assert sent["user_data"]["ip_address"] == "198.51.100.9"
    assert sent["selfie_saved"] is True
    assert "selfie_image" not in sent
    assert sent["selfie_url"].startswith("http://testserver/uploads/selfie_")
    assert sent["selfie_url"].endswith(".png")

    uploaded = test_client.get(urlparse(sent["selfie_url"]).path)
    assert uploaded.status_code == 200
    assert uploaded.content == IMAGE_BYTES

    log_text = Path(storage_settings.debug_log_path).read_text(encoding="utf-8")
    assert "Received from form:" in log_text
    assert "Sent to n8n:" in log_text


def test_method_and_json_errors(test_client: TestClient) -> None:
    get_response = test_client.get("/webhook/auth-form")
    assert get_response.status_code == 405
    assert get_response.json() == {"success": False, "error": "Method not allowed"}

    bad_json = test_client.post(
        "/webhook/auth-form",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert bad_json.status_code == 400
    assert bad_json.json() == {"success": False, "error": "Invalid JSON data"}

    preflight = test_client.options("/webhook/auth-form")
    assert preflight.status_code == 200
    assert preflight.content == b""
    assert preflight.headers["access-control-allow-methods"] == "POST, OPTIONS"


@pytest.mark.parametrize("method", ["TRACE", "PROPFIND"])
def test_unrouted_methods_get_relay_405(test_client: TestClient, method: str) -> None:
    response = test_client.request(method, "/webhook/auth-form")

    assert response.status_code == 405
    assert response.json() == {"success": False, "error": "Method not allowed"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_non_finite_json_number_is_rejected(
    test_client: TestClient, n8n_requests: list[httpx.Request]
) -> None:
    response = test_client.post(
        "/webhook/auth-form",
        content=b'{"level": NaN}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid JSON data"}
    assert n8n_requests == []
