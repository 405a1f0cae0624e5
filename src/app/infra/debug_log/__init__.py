"""Log de debug append-only (dump completo de submissões)."""

from app.infra.debug_log.file_debug_log import FileDebugLog, format_entry
from app.infra.debug_log.memory_debug_log import MemoryDebugLog

__all__ = ["FileDebugLog", "MemoryDebugLog", "format_entry"]
