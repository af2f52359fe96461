"""
Realtime Routes - Ephemeral OpenAI Realtime credentials
"""

from functools import lru_cache

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from openai import AsyncOpenAI

from config import Settings, get_settings
from models.credentials import (
    ErrorResponse,
    InterviewParameters,
    IssueErrorKind,
    Ok,
    RealtimeTokenResponse,
)
from services.realtime_token_service import RealtimeTokenService
from utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["Realtime"])
logger = get_logger("RealtimeRoutes")

CLIENT_SECRET_ERROR = "Failed to create client secret"

ERROR_MESSAGES = {kind: CLIENT_SECRET_ERROR for kind in IssueErrorKind}


@lru_cache
def get_openai_client(api_key: str) -> AsyncOpenAI:
    return AsyncOpenAI(api_key=api_key)


def get_realtime_token_service(settings: Settings = Depends(get_settings)) -> RealtimeTokenService:
    return RealtimeTokenService(
        get_openai_client(settings.openai_api_key),
        model=settings.openai_realtime_model,
    )


async def read_interview_parameters(request: Request) -> InterviewParameters:
    """
    Parse the optional JSON body without ever rejecting the request.

    Non-JSON content types, unparseable JSON and non-object bodies all
    yield the defaults.
    """
    if "json" not in request.headers.get("content-type", "").lower():
        return InterviewParameters()

    raw = await request.body()
    if not raw:
        return InterviewParameters()

    try:
        body = await request.json()
    except ValueError:
        logger.warning("Ignoring unparseable realtime-token body")
        return InterviewParameters()

    return InterviewParameters.from_body(body)


@router.post(
    "/realtime-token",
    response_model=RealtimeTokenResponse,
    responses={500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": InterviewParameters.model_json_schema()}},
        }
    },
)
async def create_realtime_token(
    params: InterviewParameters = Depends(read_interview_parameters),
    service: RealtimeTokenService = Depends(get_realtime_token_service),
):
    """
    Issue a short-lived client secret for a Realtime interviewer session

    Returns:
        - ephemeralKey: client secret valid for 600 seconds
    """
    result = await service.create_client_secret(
        role=params.role,
        tone=params.tone,
        difficulty=params.difficulty,
    )

    if isinstance(result, Ok):
        return RealtimeTokenResponse(ephemeralKey=result.value)

    logger.warning(f"Realtime token request failed: {result.kind.value}")
    return JSONResponse(status_code=500, content={"error": ERROR_MESSAGES[result.kind]})
