"""Cliente HTTP especializado para webhooks n8n.

Estende HttpClient genérico com o contrato de entrega do relay:
- Corpo JSON serializado uma vez (o tamanho vai para o log de debug)
- User-Agent fixo de identificação
- 2xx/3xx = sucesso; demais status = falha "HTTP <code>"
- Falhas de transporte viram DeliveryResult, nunca exceção
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.n8n.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.n8n.n8n_logging import log_delivery_failure, log_delivery_success
from app.domain.delivery import DeliveryResult

if TYPE_CHECKING:
    import httpx

    from config.settings import N8nSettings

logger: logging.Logger = logging.getLogger(__name__)


def parse_response_body(text: str) -> Any:
    """JSON parseado quando possível e não vazio; senão o texto bruto."""
    try:
        parsed = json.loads(text)
    except ValueError:
        return text
    return parsed or text


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 400


class N8nWebhookClient(HttpClient):
    """Entrega eventos a um webhook n8n via POST JSON."""

    async def send_event(self, url: str, payload: dict[str, Any]) -> DeliveryResult:
        """Envia o evento ao webhook.

        Args:
            url: URL do webhook n8n
            payload: Evento normalizado

        Returns:
            DeliveryResult com sucesso, resposta ou erro.
        """
        try:
            body = json.dumps(payload, allow_nan=False).encode("utf-8")
        except ValueError:
            log_delivery_failure(url, "payload_not_serializable", 0, 0)
            return DeliveryResult.transport_failure("payload_not_serializable")

        payload_size = len(body)

        try:
            response = await self.post(
                url,
                content=body,
                headers={"Content-Type": "application/json"},
            )
        except HttpError as exc:
            log_delivery_failure(url, str(exc), 0, payload_size)
            return DeliveryResult.transport_failure(str(exc), payload_size=payload_size)

        return self._process_response(url, response, payload_size)

    def _process_response(
        self,
        url: str,
        response: httpx.Response,
        payload_size: int,
    ) -> DeliveryResult:
        status_code = response.status_code
        text = response.text

        if is_success_status(status_code):
            log_delivery_success(url, status_code, payload_size)
            return DeliveryResult(
                success=True,
                response=parse_response_body(text),
                http_code=status_code,
                raw_response=text,
                payload_size=payload_size,
            )

        error = f"HTTP {status_code}"
        log_delivery_failure(url, error, status_code, payload_size)
        return DeliveryResult(
            success=False,
            response=text,
            http_code=status_code,
            error=error,
            raw_response=text,
            payload_size=payload_size,
        )


def create_n8n_webhook_client(
    settings: N8nSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> N8nWebhookClient:
    """Factory para criar cliente n8n com config padrão.

    Args:
        settings: N8nSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes).

    Returns:
        Cliente HTTP configurado para o n8n.
    """
    # Import local para evitar dependência circular
    from config.settings import get_n8n_settings

    n8n = settings or get_n8n_settings()
    config = HttpClientConfig(
        timeout_seconds=n8n.request_timeout_seconds,
        default_headers={"User-Agent": n8n.user_agent},
        verify_ssl=n8n.verify_ssl,
    )
    return N8nWebhookClient(config=config, transport=transport)
