# ========================================
# config.py - Relay configuration
# ========================================

from functools import lru_cache
from typing import Union

from pydantic_settings import BaseSettings, SettingsConfigDict

from models.credentials import Err, IssueErrorKind, Ok


class Settings(BaseSettings):
    # ---------- OpenAI Realtime ---------------------------------------- #
    openai_api_key: str = ""
    openai_realtime_model: str = "gpt-realtime"

    # ---------- HeyGen Streaming Avatar -------------------------------- #
    heygen_api_key: str = ""
    heygen_api_base: str = "https://api.heygen.com"
    heygen_timeout_seconds: float = 30.0

    # ---------- Server ------------------------------------------------- #
    host: str = "0.0.0.0"
    port: int = 4000

    # ---------- CORS --------------------------------------------------- #
    allowed_origins: str = "*"

    # ---------- Logging ------------------------------------------------ #
    log_level: str = "INFO"
    log_format: str = "console"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def validate_settings(settings: Settings) -> Union[Ok, Err]:
    """
    Check the settings the process cannot run without.

    Only the OpenAI key is required up front; the HeyGen key is checked
    per request by the HeyGen issuer.
    """
    if not settings.openai_api_key:
        return Err(IssueErrorKind.NOT_CONFIGURED, "OPENAI_API_KEY is not set")
    return Ok(settings)
