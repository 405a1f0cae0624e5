"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    follow_redirects: bool = False


class HttpError(Exception):
    """Erro de transporte HTTP (DNS, conexão, TLS, timeout)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Uma tentativa por chamada. Status de erro (4xx/5xx) não levantam
    exceção: quem chama decide o que é sucesso. `timeout_seconds` limita
    a chamada inteira (conexão, envio e leitura somados).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post(
        self,
        url: str,
        content: bytes,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with asyncio.timeout(self._config.timeout_seconds), httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
                follow_redirects=self._config.follow_redirects,
                transport=self._transport,
            ) as client:
                return await client.post(url, content=content, headers=merged_headers)
        except TimeoutError as exc:
            logger.info("http_transport_error", extra={"error_type": "TimeoutError"})
            raise HttpError(f"Request timed out after {self._config.timeout_seconds}s") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.info("http_transport_error", extra={"error_type": type(exc).__name__})
            raise HttpError(str(exc) or type(exc).__name__) from exc
