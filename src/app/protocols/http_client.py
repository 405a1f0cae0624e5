"""Protocolo do cliente HTTP que entrega eventos ao n8n.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.delivery import DeliveryResult


class N8nWebhookClientProtocol(Protocol):
    """Contrato mínimo para entregar um evento ao webhook n8n.

    Nunca levanta exceção: falhas de transporte e status de erro
    voltam como DeliveryResult com success=False.
    """

    async def send_event(self, url: str, payload: dict[str, Any]) -> DeliveryResult: ...
