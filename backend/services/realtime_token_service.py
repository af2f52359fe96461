# services/realtime_token_service.py
"""
OpenAI Realtime ephemeral credentials.

The browser connects to the Realtime API directly with the returned key;
this service only mints it.
"""
from typing import Any, Optional

import openai

from models.credentials import Err, IssueErrorKind, IssueResult, Ok
from services.interview_prompt import build_interviewer_instructions
from utils.logger import get_logger

logger = get_logger("RealtimeTokenService")

CLIENT_SECRET_TTL_SECONDS = 600


class RealtimeTokenService:
    """Mint short-lived Realtime client secrets for an interviewer session"""

    def __init__(self, client: Any, model: str = "gpt-realtime"):
        self.client = client
        self.model = model

    async def create_client_secret(
        self,
        role: Optional[str] = None,
        tone: Optional[str] = None,
        difficulty: Optional[str] = None,
    ) -> IssueResult:
        """
        Request one client secret from OpenAI.

        Args:
            role: Interview role, defaults to "Software Engineer"
            tone: Interviewer tone, defaults to "professional and friendly"
            difficulty: Question difficulty, defaults to "medium"

        Returns:
            Ok(ephemeral key) or Err(kind, detail)
        """
        instructions = build_interviewer_instructions(role, tone, difficulty)

        try:
            secret = await self.client.realtime.client_secrets.create(
                session={
                    "type": "realtime",
                    "model": self.model,
                    "instructions": instructions,
                },
                expires_after={
                    "anchor": "created_at",
                    "seconds": CLIENT_SECRET_TTL_SECONDS,
                },
            )
        except openai.APIStatusError as e:
            logger.error(f"OpenAI client secret error ({e.status_code}): {e}", exc_info=True)
            return Err(IssueErrorKind.UPSTREAM_STATUS, str(e))
        except openai.OpenAIError as e:
            logger.error(f"OpenAI client secret request failed: {e}", exc_info=True)
            return Err(IssueErrorKind.TRANSPORT, str(e))
        except Exception as e:
            logger.error(f"Failed to create client secret: {e}", exc_info=True)
            return Err(IssueErrorKind.TRANSPORT, str(e))

        value = getattr(secret, "value", None)
        if not value:
            logger.error(f"Unexpected OpenAI client secret response: {secret!r}")
            return Err(IssueErrorKind.INVALID_RESPONSE, "missing value")

        logger.info(f"✅ Created Realtime client secret (model={self.model})")
        return Ok(value)
