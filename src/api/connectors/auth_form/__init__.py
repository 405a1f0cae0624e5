"""Borda de entrada do formulário de autenticação."""

from api.connectors.auth_form.request import (
    FormRequestError,
    InvalidJsonError,
    build_request_context,
    parse_form_submission,
)

__all__ = [
    "FormRequestError",
    "InvalidJsonError",
    "build_request_context",
    "parse_form_submission",
]
