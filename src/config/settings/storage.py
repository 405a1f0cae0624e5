"""Settings de armazenamento local.

Diretório de uploads das selfies, arquivo de log de debug e
URL pública usada para montar `selfie_url`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class StorageSettings:
    """Configurações de armazenamento em disco.

    Attributes:
        uploads_dir: Diretório onde selfies grandes são gravadas
        debug_log_path: Arquivo append-only do log de debug
        public_base_url: URL base pública (vazia = derivar do request)
        test_page_enabled: Habilita a página HTML de teste
    """

    uploads_dir: str = "uploads"
    debug_log_path: str = "webhook_log.txt"
    public_base_url: str = ""
    test_page_enabled: bool = True

    def validate(self) -> list[str]:
        """Valida configurações de armazenamento."""
        errors: list[str] = []

        if not self.uploads_dir:
            errors.append("UPLOADS_DIR não pode ser vazio")

        if not self.debug_log_path:
            errors.append("DEBUG_LOG_PATH não pode ser vazio")

        if self.public_base_url and not self.public_base_url.startswith(("http://", "https://")):
            errors.append(f"PUBLIC_BASE_URL inválida: {self.public_base_url}")

        return errors


def _load_from_env() -> StorageSettings:
    """Carrega StorageSettings de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    default_test_page = "false" if environment in ("production", "prod") else "true"

    return StorageSettings(
        uploads_dir=os.getenv("UPLOADS_DIR", "uploads"),
        debug_log_path=os.getenv("DEBUG_LOG_PATH", "webhook_log.txt"),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "").rstrip("/"),
        test_page_enabled=os.getenv("TEST_PAGE_ENABLED", default_test_page).lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Retorna instância cacheada de StorageSettings."""
    return _load_from_env()
