"""Protocolo de persistência de selfies."""

from __future__ import annotations

from typing import Protocol


class SelfieStorageProtocol(Protocol):
    """Persiste uma selfie em data URL e devolve o nome do arquivo.

    Retorna None em qualquer falha (decode ou escrita).
    """

    def save(self, data_url: str) -> str | None: ...
