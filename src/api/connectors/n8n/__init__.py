"""Conector HTTP para webhooks n8n."""

from api.connectors.n8n.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.n8n.http_client import (
    N8nWebhookClient,
    create_n8n_webhook_client,
    is_success_status,
    parse_response_body,
)

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "N8nWebhookClient",
    "create_n8n_webhook_client",
    "is_success_status",
    "parse_response_body",
]
