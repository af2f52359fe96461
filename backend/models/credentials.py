# ========================================
# models/credentials.py - Token request/response models
# ========================================

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator


DEFAULT_ROLE = "Software Engineer"
DEFAULT_TONE = "professional and friendly"
DEFAULT_DIFFICULTY = "medium"


def _loose_text(value: Any) -> Optional[str]:
    if not value:
        return None
    if isinstance(value, bool):
        return "true"
    return value if isinstance(value, str) else str(value)


class InterviewParameters(BaseModel):
    """Free-form interview settings; falsy values count as unset"""

    role: Optional[str] = Field(None, example="Backend Engineer")
    tone: Optional[str] = Field(None, example="casual")
    difficulty: Optional[str] = Field(None, example="hard")

    @field_validator("role", "tone", "difficulty", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Optional[str]:
        return _loose_text(value)

    @classmethod
    def from_body(cls, body: Any) -> "InterviewParameters":
        if not isinstance(body, dict):
            return cls()
        return cls(
            role=body.get("role"),
            tone=body.get("tone"),
            difficulty=body.get("difficulty"),
        )


class RealtimeTokenResponse(BaseModel):
    ephemeralKey: str


class HeyGenTokenResponse(BaseModel):
    token: str


class ErrorResponse(BaseModel):
    error: str


class IssueErrorKind(str, Enum):
    NOT_CONFIGURED = "not_configured"
    UPSTREAM_STATUS = "upstream_status"
    TRANSPORT = "transport"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Err:
    kind: IssueErrorKind
    detail: str = ""


IssueResult = Union[Ok, Err]
