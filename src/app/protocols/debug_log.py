"""Protocolo do log de debug append-only."""

from __future__ import annotations

from typing import Any, Protocol


class DebugLogProtocol(Protocol):
    """Registra um dump legível de dados estruturados.

    Implementações não devem propagar falhas de escrita.
    """

    def record(self, message: str, data: Any) -> None: ...
