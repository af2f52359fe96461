"""
HeyGen Routes - Streaming avatar session tokens
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from models.credentials import ErrorResponse, HeyGenTokenResponse, IssueErrorKind, Ok
from services.heygen_token_service import HeyGenTokenService
from utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["HeyGen"])
logger = get_logger("HeyGenRoutes")

ERROR_MESSAGES = {
    IssueErrorKind.NOT_CONFIGURED: "HEYGEN_API_KEY is not configured on the server",
    IssueErrorKind.UPSTREAM_STATUS: "Failed to create HeyGen session token",
    IssueErrorKind.TRANSPORT: "Failed to create HeyGen token",
    IssueErrorKind.INVALID_RESPONSE: "Invalid HeyGen token response from API",
}


def get_heygen_token_service(settings: Settings = Depends(get_settings)) -> HeyGenTokenService:
    return HeyGenTokenService(
        api_key=settings.heygen_api_key,
        base_url=settings.heygen_api_base,
        timeout=settings.heygen_timeout_seconds,
    )


@router.post(
    "/heygen-token",
    response_model=HeyGenTokenResponse,
    responses={500: {"model": ErrorResponse}},
)
async def create_heygen_token(service: HeyGenTokenService = Depends(get_heygen_token_service)):
    """Issue a HeyGen streaming session token for the avatar client"""

    result = await service.create_token()

    if isinstance(result, Ok):
        return HeyGenTokenResponse(token=result.value)

    logger.warning(f"HeyGen token request failed: {result.kind.value}")
    return JSONResponse(status_code=500, content={"error": ERROR_MESSAGES[result.kind]})
