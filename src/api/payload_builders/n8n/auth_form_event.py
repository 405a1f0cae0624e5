"""Builder do evento `telegram_auth_form` enviado ao n8n.

Regras de montagem:
- Campos base sempre presentes: event_type, timestamp, server_time, source
- `level` presente -> auth_level + action (padrão "unknown")
- `form_data` presente -> user_data enriquecido com processed_at,
  ip_address e user_agent vindos do RequestContext
- `telegram_user` presente -> copiado sem alteração
- `selfie_photo` em data URL -> inline abaixo do limite, ou gravada em
  disco e referenciada por selfie_url
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from config.settings.n8n import DEFAULT_INLINE_SELFIE_MAX_CHARS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.request_context import RequestContext
    from app.protocols.selfie_storage import SelfieStorageProtocol

logger = logging.getLogger(__name__)

EVENT_TYPE = "telegram_auth_form"
EVENT_SOURCE = "telegram_web_app"
DEFAULT_ACTION = "unknown"
DATA_URL_IMAGE_PREFIX = "data:image"
SELFIE_FORMAT = "base64"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class AuthFormEventBuilder:
    """Constrói o payload do evento a partir da submissão do formulário."""

    def __init__(
        self,
        selfie_storage: SelfieStorageProtocol,
        inline_selfie_max_chars: int = DEFAULT_INLINE_SELFIE_MAX_CHARS,
        public_base_url: str = "",
    ) -> None:
        self._selfie_storage = selfie_storage
        self._inline_selfie_max_chars = inline_selfie_max_chars
        self._public_base_url = public_base_url.rstrip("/")

    def build(
        self,
        submission: Mapping[str, Any],
        context: RequestContext,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        """Constrói o payload do evento.

        Args:
            submission: Corpo JSON recebido do formulário
            context: Contexto do request atual (IP, User-Agent, host)
            now: Instante de processamento (padrão: agora, UTC)

        Returns:
            Payload pronto para serialização JSON.
        """
        moment = now or datetime.now(UTC)
        timestamp = moment.strftime(TIMESTAMP_FORMAT)

        payload: dict[str, Any] = {
            "event_type": EVENT_TYPE,
            "timestamp": timestamp,
            "server_time": int(moment.timestamp()),
            "source": EVENT_SOURCE,
        }

        if submission.get("level") is not None:
            payload["auth_level"] = submission["level"]
            action = submission.get("action")
            payload["action"] = DEFAULT_ACTION if action is None else action

        if submission.get("form_data") is not None:
            payload["user_data"] = _build_user_data(submission["form_data"], context, timestamp)

        if submission.get("telegram_user") is not None:
            payload["telegram_user"] = submission["telegram_user"]

        selfie = submission.get("selfie_photo")
        if isinstance(selfie, str) and selfie.startswith(DATA_URL_IMAGE_PREFIX):
            self._apply_selfie(payload, selfie, context)

        return payload

    def _apply_selfie(
        self,
        payload: dict[str, Any],
        selfie: str,
        context: RequestContext,
    ) -> None:
        payload["has_selfie"] = True
        payload["selfie_format"] = SELFIE_FORMAT

        if len(selfie) < self._inline_selfie_max_chars:
            payload["selfie_image"] = selfie
        else:
            filename = self._selfie_storage.save(selfie)
            if filename:
                payload["selfie_url"] = f"{self._resolve_base_url(context)}/uploads/{filename}"
                payload["selfie_saved"] = True
            else:
                # Sem referência à imagem: nem o chamador nem o n8n são avisados
                logger.warning(
                    "selfie_persist_failed",
                    extra={"selfie_size": len(selfie)},
                )

        payload["selfie_size"] = len(selfie)

    def _resolve_base_url(self, context: RequestContext) -> str:
        return self._public_base_url or context.base_url()


def _build_user_data(
    form_data: Any,
    context: RequestContext,
    processed_at: str,
) -> dict[str, Any]:
    user_data = dict(form_data) if isinstance(form_data, dict) else {}
    user_data["processed_at"] = processed_at
    user_data["ip_address"] = context.resolve_ip()
    user_data["user_agent"] = context.resolve_user_agent()
    return user_data
