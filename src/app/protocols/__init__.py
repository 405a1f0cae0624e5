"""Protocolos e contratos do core da aplicação."""

from .debug_log import DebugLogProtocol
from .http_client import N8nWebhookClientProtocol
from .selfie_storage import SelfieStorageProtocol

__all__ = [
    "DebugLogProtocol",
    "N8nWebhookClientProtocol",
    "SelfieStorageProtocol",
]
