"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class SelfieStorageError(InfrastructureError):
    """Falha ao persistir a selfie em disco."""


class SelfieDecodeError(SelfieStorageError):
    """Data URL da selfie malformada ou base64 inválido."""


class DebugLogWriteError(InfrastructureError):
    """Falha ao gravar no log de debug em arquivo."""
