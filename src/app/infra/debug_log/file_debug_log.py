"""Log de debug em arquivo texto.

Cada entrada tem o formato:

    2026-10-19 10:30:00 - Received from form:
    {'action': 'authentication_level_1', ...}
    --------------------------------------------------------------------------------

Falhas de escrita nunca interrompem o request; viram warning no log
estruturado.
"""

from __future__ import annotations

import logging
import pprint
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from utils.errors import DebugLogWriteError

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 80
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_entry(message: str, data: Any, now: datetime | None = None) -> str:
    """Formata uma entrada do log de debug."""
    stamp = (now or datetime.now(UTC)).strftime(TIMESTAMP_FORMAT)
    dump = data if isinstance(data, str) else pprint.pformat(data, width=100, sort_dicts=False)
    return f"{stamp} - {message}\n{dump}\n\n{SEPARATOR}\n"


class FileDebugLog:
    """Acrescenta entradas a um arquivo texto compartilhado.

    Sem lock: escritas concorrentes dependem do append do sistema
    operacional (uma única chamada write por entrada).
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def record(self, message: str, data: Any) -> None:
        try:
            self._append(format_entry(message, data))
        except DebugLogWriteError as exc:
            logger.warning(
                "debug_log_write_failed",
                extra={"path": str(self._path), "error": str(exc)},
            )

    def _append(self, entry: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(entry)
        except OSError as exc:
            raise DebugLogWriteError(type(exc).__name__) from exc
