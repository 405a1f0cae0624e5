"""Contexto do request HTTP usado na montagem do payload.

IP e User-Agent gravados em `user_data` saem daqui, nunca do corpo
enviado pelo formulário. A resolução de IP é heurística (headers são
falsificáveis) e não serve para autorização.
"""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Dados ambientes do request atual.

    Attributes:
        forwarded_for: Header X-Forwarded-For (bruto)
        client_ip: Header Client-IP (bruto)
        remote_addr: Endereço do socket remoto
        user_agent: Header User-Agent
        scheme: Esquema do request (http|https)
        host: Header Host
    """

    forwarded_for: str | None = None
    client_ip: str | None = None
    remote_addr: str | None = None
    user_agent: str | None = None
    scheme: str = "http"
    host: str | None = None

    def resolve_ip(self) -> str:
        """Primeiro valor não vazio: X-Forwarded-For, Client-IP, socket."""
        if self.forwarded_for:
            return self.forwarded_for
        if self.client_ip:
            return self.client_ip
        return self.remote_addr or UNKNOWN

    def resolve_user_agent(self) -> str:
        return self.user_agent or UNKNOWN

    def base_url(self) -> str:
        """URL base do request atual (sem barra final)."""
        protocol = "https://" if self.scheme == "https" else "http://"
        return f"{protocol}{self.host or 'localhost'}"
