"""Entrypoint do relay de formulário de autenticação.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.auth_form import method_not_allowed_handler
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_n8n_settings, get_storage_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

UPLOADS_MOUNT_PATH = "/uploads"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido em staging/production)
    - Garante o diretório de uploads servido em /uploads
    """
    logger.info("app_starting", extra={"service": "auth-form-relay"})
    validate_runtime_settings()
    Path(get_storage_settings().uploads_dir).mkdir(parents=True, exist_ok=True)

    if not get_n8n_settings().is_configured:
        logger.warning("n8n_webhook_not_configured", extra={"component": "startup"})

    yield

    logger.info("app_shutting_down", extra={"service": "auth-form-relay"})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Auth Form Relay",
        description="Relay do formulário de autenticação Telegram para webhooks n8n",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())
    fastapi_app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    # Selfies grandes gravadas em disco são referenciadas por /uploads/<arquivo>
    fastapi_app.mount(
        UPLOADS_MOUNT_PATH,
        StaticFiles(directory=get_storage_settings().uploads_dir, check_dir=False),
        name="uploads",
    )

    logger.info("app_configured", extra={"service": "auth-form-relay"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting auth-form-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
