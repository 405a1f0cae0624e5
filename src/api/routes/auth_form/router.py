"""Router do formulário de autenticação — agrega relay e página de teste."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.auth_form.diagnostic_page import router as diagnostic_page_router
from api.routes.auth_form.webhook import router as webhook_router

router = APIRouter()

router.include_router(webhook_router)
router.include_router(diagnostic_page_router)
