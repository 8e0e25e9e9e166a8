import logging
from typing import Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.exceptions import InvalidResponseError, UnexpectedError, UpstreamError, ValidationError
from schemas import ErrorResponse, PoemRequest, PoemResponse
from services.poem_service import PoemService
from dependencies.services import get_poem_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["poems"])

THEME_REQUIRED = "Theme is required"
GENERATION_FAILED = "Failed to generate poem. Please try again."
INVALID_AI_RESPONSE = "Invalid response from AI service"
UNEXPECTED_ERROR = "An unexpected error occurred. Please try again."


def error_payload(exc: Exception) -> Tuple[int, dict]:
    """Переводит исключение генерации в (HTTP-статус, тело ответа)."""
    if isinstance(exc, ValidationError):
        return 400, {"error": THEME_REQUIRED}
    if isinstance(exc, InvalidResponseError):
        return 500, {"error": INVALID_AI_RESPONSE, "details": exc.details}
    if isinstance(exc, UpstreamError):
        return 500, {"error": GENERATION_FAILED, "details": exc.details}
    return 500, {"error": UNEXPECTED_ERROR}


@router.post(
    "/generate-poem",
    response_model=PoemResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_poem(request: Request, poem_service: PoemService = Depends(get_poem_service)):
    try:
        body = await request.json()
        poem_in = PoemRequest.model_validate(body)
        poem = await poem_service.generate(poem_in.theme, poem_in.style, poem_in.mood)
    except (ValidationError, UpstreamError) as e:
        status_code, payload = error_payload(e)
        logger.warning("Poem generation failed: %s (upstream status %s)", e, getattr(e, "status_code", None))
        return JSONResponse(status_code=status_code, content=payload)
    except Exception as e:
        logger.exception("Error generating poem: %s", e)
        status_code, payload = error_payload(UnexpectedError(str(e)))
        return JSONResponse(status_code=status_code, content=payload)

    return PoemResponse(poem=poem)
