"""Configuração do pytest para o relay de formulário de autenticação."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.bootstrap import initialize_test_app  # noqa: E402
from app.domain.request_context import RequestContext  # noqa: E402
from config.settings import N8nSettings  # noqa: E402

WEBHOOK_URL = "https://n8n.example.com/webhook/auth-form"


def pytest_configure(config: pytest.Config) -> None:
    initialize_test_app()


@pytest.fixture
def n8n_settings() -> N8nSettings:
    return N8nSettings(webhook_url=WEBHOOK_URL)


@pytest.fixture
def request_context() -> RequestContext:
    return RequestContext(
        forwarded_for=None,
        client_ip=None,
        remote_addr="203.0.113.7",
        user_agent="TelegramWebView/10.0",
        scheme="https",
        host="relay.example.com",
    )


@pytest.fixture
def level_one_submission() -> dict[str, object]:
    return {
        "level": 1,
        "action": "authentication_level_1",
        "form_data": {"first_name": "A", "last_name": "B", "phone": "09123456789"},
    }
