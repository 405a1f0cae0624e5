"""Factories — criação de implementações concretas.

Este módulo centraliza a criação das dependências do relay a partir
das settings de ambiente. Testes podem chamar cada factory com
settings ou implementações próprias.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.n8n import create_n8n_webhook_client
from api.payload_builders.n8n import AuthFormEventBuilder
from app.infra.debug_log import FileDebugLog
from app.infra.storage import LocalSelfieStorage
from app.use_cases.auth_form import RelayAuthFormSubmissionUseCase
from config.settings import get_n8n_settings, get_storage_settings

if TYPE_CHECKING:
    from app.protocols.debug_log import DebugLogProtocol
    from app.protocols.http_client import N8nWebhookClientProtocol
    from app.protocols.selfie_storage import SelfieStorageProtocol
    from config.settings import N8nSettings, StorageSettings

logger = logging.getLogger(__name__)


def create_selfie_storage(settings: StorageSettings | None = None) -> SelfieStorageProtocol:
    """Cria storage local de selfies no UPLOADS_DIR."""
    storage = settings or get_storage_settings()
    return LocalSelfieStorage(storage.uploads_dir)


def create_debug_log(settings: StorageSettings | None = None) -> DebugLogProtocol:
    """Cria log de debug em arquivo no DEBUG_LOG_PATH."""
    storage = settings or get_storage_settings()
    return FileDebugLog(storage.debug_log_path)


def create_event_builder(
    selfie_storage: SelfieStorageProtocol | None = None,
    n8n_settings: N8nSettings | None = None,
    storage_settings: StorageSettings | None = None,
) -> AuthFormEventBuilder:
    """Cria o builder do evento com limite inline e URL pública."""
    n8n = n8n_settings or get_n8n_settings()
    storage = storage_settings or get_storage_settings()
    return AuthFormEventBuilder(
        selfie_storage=selfie_storage or create_selfie_storage(storage),
        inline_selfie_max_chars=n8n.inline_selfie_max_chars,
        public_base_url=storage.public_base_url,
    )


def create_relay_use_case(
    *,
    n8n_settings: N8nSettings | None = None,
    storage_settings: StorageSettings | None = None,
    webhook_client: N8nWebhookClientProtocol | None = None,
    selfie_storage: SelfieStorageProtocol | None = None,
    debug_log: DebugLogProtocol | None = None,
) -> RelayAuthFormSubmissionUseCase:
    """Monta o use case de relay com todas as dependências.

    Qualquer dependência omitida é criada a partir do ambiente.
    """
    n8n = n8n_settings or get_n8n_settings()
    storage = storage_settings or get_storage_settings()

    logger.info(
        "relay_use_case_created",
        extra={
            "n8n_configured": n8n.is_configured,
            "uploads_dir": storage.uploads_dir,
            "debug_log_path": storage.debug_log_path,
        },
    )
    return RelayAuthFormSubmissionUseCase(
        settings=n8n,
        builder=create_event_builder(selfie_storage, n8n, storage),
        webhook_client=webhook_client or create_n8n_webhook_client(n8n),
        debug_log=debug_log or create_debug_log(storage),
    )
