"""Testes da página HTML de teste."""

from __future__ import annotations

import pytest
from fastapi import HTTPException

from api.routes.auth_form import diagnostic_page
from config.settings import StorageSettings


def test_render_points_to_relay_endpoint() -> None:
    html = diagnostic_page.render_diagnostic_page()
    assert "fetch('/webhook/auth-form'" in html
    assert "__WEBHOOK_PATH__" not in html


@pytest.mark.asyncio
async def test_page_served_when_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        diagnostic_page, "get_storage_settings", lambda: StorageSettings(test_page_enabled=True)
    )

    response = await diagnostic_page.diagnostic_page()

    assert response.status_code == 200
    assert b"Webhook Test Page" in response.body


@pytest.mark.asyncio
async def test_page_hidden_when_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        diagnostic_page, "get_storage_settings", lambda: StorageSettings(test_page_enabled=False)
    )

    with pytest.raises(HTTPException) as excinfo:
        await diagnostic_page.diagnostic_page()

    assert excinfo.value.status_code == 404
