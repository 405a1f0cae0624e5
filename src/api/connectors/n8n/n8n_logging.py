"""Helpers de logging para entregas ao n8n (sem PII)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_delivery_failure(
    url: str,
    error: str,
    http_code: int,
    payload_size: int,
) -> None:
    """Loga falha de entrega sem expor o payload."""
    logger.warning(
        "n8n_delivery_failed",
        extra={
            "url": url,
            "error": error,
            "http_code": http_code,
            "payload_size": payload_size,
        },
    )


def log_delivery_success(url: str, http_code: int, payload_size: int) -> None:
    """Loga sucesso sem expor o payload."""
    logger.info(
        "n8n_delivery_succeeded",
        extra={
            "url": url,
            "http_code": http_code,
            "payload_size": payload_size,
        },
    )
