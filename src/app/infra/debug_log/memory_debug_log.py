"""Log de debug em memória — apenas para desenvolvimento e testes."""

from __future__ import annotations

from typing import Any


class MemoryDebugLog:
    """Guarda as entradas em lista, na ordem de chegada."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, Any]] = []

    def record(self, message: str, data: Any) -> None:
        self.entries.append((message, data))

    def messages(self) -> list[str]:
        return [message for message, _ in self.entries]
