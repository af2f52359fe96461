# ========================================
# services/heygen_token_service.py - HeyGen streaming avatar tokens
# ========================================

from typing import Optional

import httpx

from models.credentials import Err, IssueErrorKind, IssueResult, Ok
from utils.logger import get_logger

logger = get_logger("HeyGenTokenService")


class HeyGenTokenService:
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.heygen.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def create_token(self) -> IssueResult:
        """Create a streaming session token (bare POST, key in x-api-key)"""

        if not self.api_key:
            return Err(IssueErrorKind.NOT_CONFIGURED, "HEYGEN_API_KEY is not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/v1/streaming.create_token",
                    headers={"x-api-key": self.api_key},
                )

                if not response.is_success:
                    logger.error(f"HeyGen create_token error ({response.status_code}): {response.text}")
                    return Err(IssueErrorKind.UPSTREAM_STATUS, response.text)

                payload = response.json()

        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error calling HeyGen create_token: {e}", exc_info=True)
            return Err(IssueErrorKind.TRANSPORT, str(e))
        except Exception as e:
            logger.error(f"Error in HeyGen create_token: {e}", exc_info=True)
            return Err(IssueErrorKind.TRANSPORT, str(e))

        data = payload.get("data") if isinstance(payload, dict) else None
        token = data.get("token") if isinstance(data, dict) else None

        if not token or not isinstance(token, str):
            logger.error(f"Unexpected HeyGen token response: {data!r}")
            return Err(IssueErrorKind.INVALID_RESPONSE, "missing data.token")

        logger.info("✅ Created HeyGen session token")
        return Ok(token)
