"""Rotas do formulário de autenticação."""

from api.routes.auth_form.router import router
from api.routes.auth_form.webhook import method_not_allowed_handler

__all__ = ["method_not_allowed_handler", "router"]
