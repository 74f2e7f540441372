"""
RFC 9457 problem details, the machine-readable error body of the API.

See https://datatracker.ietf.org/doc/html/rfc9457
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class ProblemDetails(BaseModel):
    """Structured server-side error.

    Every member is optional. ``errors`` groups validation messages by field
    name. Extension members sent by the server are kept as extra fields.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    type: Optional[str] = None
    title: Optional[str] = None
    status: Optional[int] = None
    detail: Optional[str] = None
    instance: Optional[str] = None
    trace_id: Optional[str] = None
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("errors", mode="before")
    @classmethod
    def _null_errors_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v
