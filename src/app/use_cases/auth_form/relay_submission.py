"""Use case de relay da submissão do formulário para o n8n."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.delivery import DeliveryResult

if TYPE_CHECKING:
    from api.payload_builders.n8n import AuthFormEventBuilder
    from app.domain.request_context import RequestContext
    from app.protocols.debug_log import DebugLogProtocol
    from app.protocols.http_client import N8nWebhookClientProtocol
    from config.settings import N8nSettings

logger = logging.getLogger(__name__)

MSG_NOT_CONFIGURED = "N8N webhook URL not configured"
MSG_SENT = "Data sent to n8n successfully"
MSG_SEND_FAILED = "Failed to send to n8n"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class RelayOutcome:
    """Resposta para o chamador (status HTTP + corpo JSON)."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return bool(self.body.get("success"))


class RelayAuthFormSubmissionUseCase:
    """Orquestra log, validação de destino, build, envio e resposta."""

    def __init__(
        self,
        settings: N8nSettings,
        builder: AuthFormEventBuilder,
        webhook_client: N8nWebhookClientProtocol,
        debug_log: DebugLogProtocol,
    ) -> None:
        self._settings = settings
        self._builder = builder
        self._webhook_client = webhook_client
        self._debug_log = debug_log

    async def execute(
        self,
        submission: dict[str, Any],
        context: RequestContext,
    ) -> RelayOutcome:
        """Executa o relay de uma submissão já parseada.

        Nunca levanta exceção: toda falha vira RelayOutcome com
        success=False e a submissão original ecoada.
        """
        self._debug_log.record("Received from form:", submission)

        if not self._settings.is_configured:
            logger.warning("n8n_webhook_not_configured")
            return RelayOutcome(
                status_code=200,
                body={
                    "success": False,
                    "error": MSG_NOT_CONFIGURED,
                    "received_data": submission,
                },
            )

        url = self._settings.webhook_url
        try:
            payload = self._builder.build(submission, context)
            result = await self._webhook_client.send_event(url, payload)
        except Exception as exc:
            logger.exception("auth_form_relay_failed", extra={"error_type": type(exc).__name__})
            self._record_delivery(url, DeliveryResult.transport_failure(type(exc).__name__))
            return _failure_outcome(submission, type(exc).__name__)

        self._record_delivery(url, result)

        if result.success:
            return RelayOutcome(
                status_code=200,
                body={
                    "success": True,
                    "message": MSG_SENT,
                    "n8n_response": result.response,
                    "timestamp": _now_string(),
                },
            )
        return _failure_outcome(submission, result.error)

    def _record_delivery(self, url: str, result: DeliveryResult) -> None:
        self._debug_log.record(
            "Sent to n8n:",
            {
                "url": url,
                "payload_size": result.payload_size,
                "http_code": result.http_code,
                "response": result.raw_response,
                "error": result.error,
            },
        )


def _failure_outcome(submission: dict[str, Any], error: str | None) -> RelayOutcome:
    return RelayOutcome(
        status_code=200,
        body={
            "success": False,
            "error": MSG_SEND_FAILED,
            "n8n_error": error,
            "received_data": submission,
            "timestamp": _now_string(),
        },
    )


def _now_string() -> str:
    return datetime.now(UTC).strftime(TIMESTAMP_FORMAT)
