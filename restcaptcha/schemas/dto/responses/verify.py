"""
Response DTOs for the verification endpoint.

VerifyStatus   — tri-state verification outcome
VerifyResponse — body of a successful POST /verify
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class VerifyStatus(str, Enum):
    UNKNOWN = "unknown"
    SUCCESS = "success"
    FAILURE = "failure"

    @classmethod
    def parse(cls, value: Any) -> "VerifyStatus":
        """Map a wire value onto a member; anything unrecognised is UNKNOWN."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalised = value.strip().lower()
            for member in cls:
                if member.value == normalised:
                    return member
        return cls.UNKNOWN


class VerifyResponse(BaseModel):
    """Response body for POST /verify."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    status: VerifyStatus = VerifyStatus.UNKNOWN
    host_name: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, v: Any) -> VerifyStatus:
        return VerifyStatus.parse(v)
