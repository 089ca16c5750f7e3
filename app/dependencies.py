from __future__ import annotations

from fastapi import Request

from app.core.settings import Settings
from app.services.gemini_service import TextGenerator


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_text_generator(request: Request) -> TextGenerator:
    return request.app.state.gemini_service
