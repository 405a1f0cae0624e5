"""Use cases do formulário de autenticação."""

from app.use_cases.auth_form.relay_submission import (
    MSG_NOT_CONFIGURED,
    MSG_SEND_FAILED,
    MSG_SENT,
    RelayAuthFormSubmissionUseCase,
    RelayOutcome,
)

__all__ = [
    "MSG_NOT_CONFIGURED",
    "MSG_SEND_FAILED",
    "MSG_SENT",
    "RelayAuthFormSubmissionUseCase",
    "RelayOutcome",
]
