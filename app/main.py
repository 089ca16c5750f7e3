import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.api import health, proxy
from app.core.cors import CorsMiddleware
from app.core.logging import configure_logging
from app.core.settings import Settings, get_settings
from app.services.gemini_service import GeminiService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    if not settings.is_configured:
        logger.error("GEMINI_API_KEY environment variable is not set!")

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.gemini_service = GeminiService(settings=settings)

    app.add_middleware(CorsMiddleware, allow_origin=settings.cors_allow_origin)
    app.add_exception_handler(RequestValidationError, proxy.validation_error_handler)

    app.include_router(proxy.router, prefix="/api")

    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
