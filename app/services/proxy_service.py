from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Union

from google.genai import types

from app.core.settings import Settings
from app.models.chat import ChatMessage, GenerateRequest
from app.services.gemini_service import TextGenerator

logger = logging.getLogger(__name__)


class ProxyError(Enum):
    BAD_REQUEST = (400, "Missing required fields in request body.")
    SERVER_MISCONFIGURED = (500, "Server error: Gemini API Key not configured.")
    EMPTY_UPSTREAM_RESPONSE = (500, "AI returned an empty response.")
    UPSTREAM_CALL_FAILED = (500, "Failed to generate AI response. Check server logs.")

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message


@dataclass(frozen=True)
class GenerateOk:
    text: str


@dataclass(frozen=True)
class GenerateError:
    kind: ProxyError


GenerateResult = Union[GenerateOk, GenerateError]


def normalize_role(role: Any) -> str:
    return "user" if role == "user" else "model"


def to_content(message: ChatMessage) -> types.Content:
    return types.Content(
        role=normalize_role(message.role),
        parts=[types.Part.from_text(text=message.text or "")],
    )


def build_contents(
    history: Iterable[ChatMessage], user_query: str
) -> list[types.Content]:
    """Reshape client history into the upstream content sequence.

    The current query is appended unless the client already sent it as the
    last history entry.
    """
    contents = [to_content(msg) for msg in history]

    if not contents or contents[-1].parts[0].text != user_query:
        contents.append(
            types.Content(role="user", parts=[types.Part.from_text(text=user_query)])
        )

    return contents


def check_configuration(settings: Settings) -> ProxyError | None:
    if not settings.is_configured:
        return ProxyError.SERVER_MISCONFIGURED
    return None


def validate_request(request: GenerateRequest) -> ProxyError | None:
    # An empty history list is valid; only an absent one is rejected.
    if not request.user_query or not request.system_prompt or request.history is None:
        return ProxyError.BAD_REQUEST
    return None


async def generate_response(
    request: GenerateRequest,
    settings: Settings,
    generator: TextGenerator,
) -> GenerateResult:
    error = check_configuration(settings) or validate_request(request)
    if error is not None:
        return GenerateError(error)

    if request.scenario is not None:
        logger.debug("Ignoring scenario field: %r", request.scenario)

    contents = build_contents(request.history, request.user_query)

    try:
        text = await generator.generate(
            model=settings.gemini_model,
            contents=contents,
            system_instruction=request.system_prompt,
            temperature=settings.gemini_temperature,
        )
    except Exception:
        logger.exception("Error calling Gemini API")
        return GenerateError(ProxyError.UPSTREAM_CALL_FAILED)

    if not text:
        logger.warning("Gemini returned an empty response")
        return GenerateError(ProxyError.EMPTY_UPSTREAM_RESPONSE)

    return GenerateOk(text)
