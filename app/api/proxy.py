import logging

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.settings import Settings
from app.dependencies import get_app_settings, get_text_generator
from app.models.chat import ErrorResponse, GenerateRequest, GenerateResponse
from app.services.gemini_service import TextGenerator
from app.services.proxy_service import (
    GenerateError,
    GenerateResult,
    ProxyError,
    check_configuration,
    generate_response,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(kind: ProxyError) -> JSONResponse:
    return JSONResponse(
        status_code=kind.status_code,
        content=ErrorResponse(error=kind.message).model_dump(),
    )


def result_response(result: GenerateResult) -> JSONResponse:
    if isinstance(result, GenerateError):
        return error_response(result.kind)
    return JSONResponse(
        status_code=200,
        content=GenerateResponse(text=result.text).model_dump(),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies with the proxy's own error shape instead of a 422."""
    settings: Settings = request.app.state.settings
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return error_response(check_configuration(settings) or ProxyError.BAD_REQUEST)


@router.post(
    "/generate-response",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_response_endpoint(
    request: GenerateRequest,
    settings: Settings = Depends(get_app_settings),
    generator: TextGenerator = Depends(get_text_generator),
) -> JSONResponse:
    result = await generate_response(request, settings, generator)
    return result_response(result)
