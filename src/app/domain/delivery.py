"""Resultado da entrega do evento ao webhook n8n."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Resultado de uma chamada ao webhook.

    Attributes:
        success: True para status 2xx/3xx
        response: Corpo da resposta (JSON parseado ou texto bruto)
        http_code: Status HTTP (0 quando não houve resposta)
        error: Descrição do erro (transporte ou "HTTP <code>")
        raw_response: Corpo bruto da resposta
        payload_size: Tamanho em bytes do JSON enviado
    """

    success: bool
    response: Any = None
    http_code: int = 0
    error: str | None = None
    raw_response: str | None = None
    payload_size: int = 0

    @classmethod
    def transport_failure(cls, error: str, payload_size: int = 0) -> DeliveryResult:
        return cls(success=False, error=error, payload_size=payload_size)
