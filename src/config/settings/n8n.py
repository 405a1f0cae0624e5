"""Settings do webhook n8n de destino.

A URL padrão é um placeholder: enquanto não for trocada via
N8N_WEBHOOK_URL, o relay responde "not configured" sem chamar o n8n.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

PLACEHOLDER_WEBHOOK_URL: str = "https://your-n8n-domain.com/webhook/auth-form"
PLACEHOLDER_MARKER: str = "your-n8n-domain"
DEFAULT_USER_AGENT: str = "Telegram-Auth-Webhook/1.0"
DEFAULT_INLINE_SELFIE_MAX_CHARS: int = 1_000_000


@dataclass(frozen=True)
class N8nSettings:
    """Configurações do envio para o n8n.

    Attributes:
        webhook_url: URL do webhook n8n que recebe o evento
        request_timeout_seconds: Timeout total da chamada HTTP
        user_agent: User-Agent enviado ao n8n
        verify_ssl: Verificação TLS de peer e host
        inline_selfie_max_chars: Tamanho (em caracteres) abaixo do qual
            a selfie segue inline no payload
    """

    webhook_url: str = PLACEHOLDER_WEBHOOK_URL
    request_timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    inline_selfie_max_chars: int = DEFAULT_INLINE_SELFIE_MAX_CHARS

    @property
    def is_configured(self) -> bool:
        """True se a URL foi definida e não é o placeholder."""
        return bool(self.webhook_url) and PLACEHOLDER_MARKER not in self.webhook_url

    def validate(self) -> list[str]:
        """Valida configurações do n8n.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.is_configured:
            errors.append("N8N_WEBHOOK_URL não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("N8N_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.inline_selfie_max_chars <= 0:
            errors.append("SELFIE_INLINE_MAX_CHARS deve ser > 0")

        return errors


def _load_from_env() -> N8nSettings:
    """Carrega N8nSettings de variáveis de ambiente."""
    return N8nSettings(
        webhook_url=os.getenv("N8N_WEBHOOK_URL", PLACEHOLDER_WEBHOOK_URL).strip(),
        request_timeout_seconds=float(os.getenv("N8N_REQUEST_TIMEOUT_SECONDS", "30")),
        user_agent=os.getenv("N8N_USER_AGENT", DEFAULT_USER_AGENT),
        verify_ssl=os.getenv("N8N_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
        inline_selfie_max_chars=int(
            os.getenv("SELFIE_INLINE_MAX_CHARS", str(DEFAULT_INLINE_SELFIE_MAX_CHARS))
        ),
    )


@lru_cache(maxsize=1)
def get_n8n_settings() -> N8nSettings:
    """Retorna instância cacheada de N8nSettings."""
    return _load_from_env()
