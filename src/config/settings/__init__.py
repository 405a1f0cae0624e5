"""Agregador de settings do relay de formulário de autenticação.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Destino n8n
from config.settings.n8n import (
    DEFAULT_USER_AGENT,
    PLACEHOLDER_WEBHOOK_URL,
    N8nSettings,
    get_n8n_settings,
)

# Armazenamento local
from config.settings.storage import (
    StorageSettings,
    get_storage_settings,
)

__all__ = [
    # Constants
    "DEFAULT_USER_AGENT",
    "PLACEHOLDER_WEBHOOK_URL",
    # Base
    "BaseSettings",
    "Environment",
    # n8n
    "N8nSettings",
    # Storage
    "StorageSettings",
    "get_base_settings",
    "get_n8n_settings",
    "get_storage_settings",
]
