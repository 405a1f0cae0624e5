"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DebugLogWriteError,
    InfrastructureError,
    SelfieDecodeError,
    SelfieStorageError,
)

__all__ = [
    "DebugLogWriteError",
    "InfrastructureError",
    "SelfieDecodeError",
    "SelfieStorageError",
]
