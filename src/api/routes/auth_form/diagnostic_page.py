"""Página HTML de teste manual do relay.

Envia uma submissão de exemplo (nível 1 ou 2) ao endpoint de relay e
mostra o JSON retornado. Desabilitada por padrão em produção
(TEST_PAGE_ENABLED).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse

from api.routes.auth_form.webhook import WEBHOOK_PATH
from config.settings import get_storage_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix=WEBHOOK_PATH)

_DIAGNOSTIC_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Webhook Test Page</title>
    <style>
        body { font-family: Arial, sans-serif; padding: 20px; }
        .container { max-width: 800px; margin: 0 auto; }
        .status { padding: 10px; margin: 10px 0; border-radius: 5px; }
        .success { background: #d4edda; color: #155724; }
        .test-form { background: #f8f9fa; padding: 20px; border-radius: 10px; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Webhook Test Page</h1>
        <div class="status success"><strong>Status:</strong> Webhook is running</div>
        <div class="test-form">
            <h2>Test the Webhook</h2>
            <form id="testForm">
                <div>
                    <label>Level:</label>
                    <select id="level">
                        <option value="1">Level 1</option>
                        <option value="2">Level 2</option>
                    </select>
                </div>
                <div><label>First Name:</label> <input type="text" id="firstName" value="Test User"></div>
                <div><label>Last Name:</label> <input type="text" id="lastName" value="Test Last"></div>
                <div><label>Phone:</label> <input type="text" id="phone" value="09123456789"></div>
                <button type="button" onclick="testWebhook()">Test Webhook</button>
            </form>
            <div id="testResult"></div>
        </div>
    </div>
    <script>
        async function testWebhook() {
            const level = document.getElementById('level').value;
            const data = {
                action: 'authentication_level_' + level,
                level: parseInt(level),
                form_data: {
                    first_name: document.getElementById('firstName').value,
                    last_name: document.getElementById('lastName').value,
                    phone: document.getElementById('phone').value,
                    submission_time: new Date().toISOString()
                },
                telegram_user: { telegram_id: 123456789, telegram_username: 'testuser' },
                source: 'web_test'
            };
            const result = document.getElementById('testResult');
            try {
                const response = await fetch('__WEBHOOK_PATH__', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify(data)
                });
                result.textContent = '';
                const pre = document.createElement('pre');
                pre.textContent = JSON.stringify(await response.json(), null, 2);
                result.appendChild(pre);
            } catch (error) {
                result.textContent = 'Error: ' + error.message;
            }
        }
    </script>
</body>
</html>
"""


def render_diagnostic_page(webhook_path: str = WEBHOOK_PATH) -> str:
    return _DIAGNOSTIC_PAGE_TEMPLATE.replace("__WEBHOOK_PATH__", webhook_path)


@router.get("/test", response_class=HTMLResponse)
async def diagnostic_page() -> HTMLResponse:
    """Serve a página de teste, se habilitada."""
    if not get_storage_settings().test_page_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    logger.debug("auth_form_diagnostic_page_served")
    return HTMLResponse(content=render_diagnostic_page())
