"""Endpoint de relay do formulário de autenticação.

Endpoint único, despachado por método:
- OPTIONS: preflight CORS, 200 sem corpo
- POST: parse do JSON e relay para o n8n
- Qualquer outro método: 405

Toda resposta leva os headers CORS permissivos (POST, OPTIONS,
Content-Type), inclusive erros.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.connectors.auth_form import (
    InvalidJsonError,
    build_request_context,
    parse_form_submission,
)
from app.bootstrap import get_relay_use_case
from app.observability import correlation_scope
from app.use_cases.auth_form import RelayAuthFormSubmissionUseCase

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/webhook/auth-form"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Métodos fora desta lista chegam via method_not_allowed_handler
DISPATCH_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(prefix=WEBHOOK_PATH)

METHOD_NOT_ALLOWED_BODY = {"success": False, "error": "Method not allowed"}


def _json_response(
    status_code: int,
    body: dict[str, Any],
    correlation_id: str | None = None,
) -> JSONResponse:
    headers = dict(CORS_HEADERS)
    if correlation_id:
        headers["X-Correlation-ID"] = correlation_id
    return JSONResponse(content=body, status_code=status_code, headers=headers)


@router.api_route("", methods=DISPATCH_METHODS, response_model=None)
async def auth_form_webhook(
    request: Request,
    use_case: RelayAuthFormSubmissionUseCase = Depends(get_relay_use_case),
) -> Response:
    """Recebe a submissão do formulário e repassa ao n8n.

    Returns:
        JSON com success=True e a resposta do n8n, ou success=False
        com o motivo e a submissão original ecoada.
    """
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    if request.method != "POST":
        return _json_response(
            status.HTTP_405_METHOD_NOT_ALLOWED,
            METHOD_NOT_ALLOWED_BODY,
        )

    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        raw_body = await request.body()

        try:
            submission = parse_form_submission(raw_body)
        except InvalidJsonError as exc:
            logger.warning(
                "auth_form_json_invalid",
                extra={"error": str(exc), "payload_size": len(raw_body)},
            )
            return _json_response(
                status.HTTP_400_BAD_REQUEST,
                {"success": False, "error": "Invalid JSON data"},
                correlation_id,
            )

        logger.info(
            "auth_form_received",
            extra={
                "payload_size": len(raw_body),
                "level": submission.get("level"),
                "has_selfie_field": bool(submission.get("selfie_photo")),
            },
        )

        outcome = await use_case.execute(submission, build_request_context(request))

        logger.info(
            "auth_form_relayed",
            extra={"success": outcome.success, "status_code": outcome.status_code},
        )
        return _json_response(outcome.status_code, outcome.body, correlation_id)


async def method_not_allowed_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """Responde 405 do relay para métodos que o roteador não despacha.

    Registrado no app para StarletteHTTPException; demais paths e
    status seguem o handler padrão do FastAPI.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and (
        request.url.path.rstrip("/") == WEBHOOK_PATH
    ):
        return _json_response(status.HTTP_405_METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED_BODY)
    return await http_exception_handler(request, exc)
