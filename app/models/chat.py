from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    role: Any = None  # "user" or "model"; any other value, of any type, becomes "model"
    text: str | None = None


class GenerateRequest(BaseModel):
    """Body of ``POST /api/generate-response``.

    Every field is optional at the schema level so that a missing one is
    reported with the proxy's own 400 message rather than a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_query: str | None = Field(default=None, alias="userQuery")
    system_prompt: str | None = Field(default=None, alias="systemPrompt")
    scenario: Any = None
    history: list[ChatMessage] | None = None


class GenerateResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
