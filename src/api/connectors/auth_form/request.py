"""Parse do corpo e extração do contexto do request do formulário."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from app.domain.request_context import RequestContext

if TYPE_CHECKING:
    from starlette.requests import Request


class FormRequestError(ValueError):
    """Erro base para requests inválidos do formulário."""


class InvalidJsonError(FormRequestError):
    """Corpo ausente, JSON inválido, vazio ou não-objeto."""


def _reject_constant(name: str) -> Any:
    # NaN, Infinity e -Infinity não são JSON válido
    raise InvalidJsonError("invalid_json")


def parse_form_submission(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo bruto em uma submissão.

    Args:
        raw_body: Corpo bruto do request

    Raises:
        InvalidJsonError: Se o JSON for inválido, vazio ou não for objeto.

    Returns:
        Submissão como dict (não vazio).
    """
    if not raw_body or not raw_body.strip():
        raise InvalidJsonError("empty_body")

    try:
        submission = json.loads(raw_body, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(submission, dict):
        raise InvalidJsonError("payload_not_object")

    if not submission:
        raise InvalidJsonError("empty_object")

    return submission


def build_request_context(request: Request) -> RequestContext:
    """Monta o RequestContext a partir do request Starlette."""
    headers = request.headers
    return RequestContext(
        forwarded_for=headers.get("x-forwarded-for"),
        client_ip=headers.get("client-ip"),
        remote_addr=request.client.host if request.client else None,
        user_agent=headers.get("user-agent"),
        scheme=request.url.scheme,
        host=headers.get("host"),
    )
