"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="auth_form_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("n8n_delivery_succeeded", extra={"http_code": 200})

Todo registro sai em JSON com correlation_id e service. Dados do
formulário (nome, telefone, selfie) nunca vão para este log; o dump
completo fica apenas no log de debug em arquivo.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
