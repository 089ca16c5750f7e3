from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from google import genai
from google.genai import types

from app.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(
        self,
        *,
        model: str,
        contents: list[types.Content],
        system_instruction: str,
        temperature: float,
    ) -> str | None: ...


class GeminiService:
    def __init__(self, settings: Settings | None = None, client: Any = None):
        self._settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> genai.Client:
        # Created on first use: the proxy must start even without a key.
        if self._client is None:
            if not self._settings.gemini_api_key:
                raise RuntimeError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self._settings.gemini_api_key)
        return self._client

    async def generate(
        self,
        *,
        model: str,
        contents: list[types.Content],
        system_instruction: str,
        temperature: float,
    ) -> str | None:
        config = types.GenerateContentConfig(
            system_instruction=types.Content(
                parts=[types.Part.from_text(text=system_instruction)]
            ),
            temperature=temperature,
        )

        def _send() -> str | None:
            response = self.client.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
            return getattr(response, "text", None)

        logger.debug("Calling %s with %d content entries", model, len(contents))
        return await asyncio.to_thread(_send)
