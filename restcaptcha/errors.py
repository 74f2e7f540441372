"""
Client error hierarchy.

RestCaptchaError is the base for all errors raised by this library itself.
ProblemDetailsError is raised when the RESTCaptcha API answers a request with
an RFC 9457 problem details body (content type application/problem+json).

Transport failures and plain unsuccessful status codes are not wrapped: they
surface as httpx.TransportError / httpx.HTTPStatusError, and cancellation as
asyncio.CancelledError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from restcaptcha.schemas.dto.responses.problem import ProblemDetails


class RestCaptchaError(Exception):
    """Base client error. All typed errors inherit from this."""

    error_code: str = "restcaptcha_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ProblemDetailsError(RestCaptchaError):
    """The API returned a structured error body.

    The parsed ProblemDetails is available as ``details``; the most useful
    members are mirrored as properties for convenience.
    """

    error_code = "problem_details"
    details: "ProblemDetails"

    def __init__(self, details: "ProblemDetails") -> None:
        super().__init__(details.title or "RESTCaptcha API error", details=details)

    @property
    def status_code(self) -> Optional[int]:
        return self.details.status

    @property
    def title(self) -> Optional[str]:
        return self.details.title

    @property
    def trace_id(self) -> Optional[str]:
        return self.details.trace_id

    @property
    def errors(self) -> dict[str, list[str]]:
        return self.details.errors

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        payload["details"] = self.details.model_dump(by_alias=True, exclude_none=True)
        return payload

    def __str__(self) -> str:
        d = self.details
        lines = [
            f"Type    : {d.type}",
            f"Title   : {d.title}",
            f"Status  : {d.status}",
            f"Detail  : {d.detail}",
            f"Instance: {d.instance}",
            f"Errors  : {d.errors}",
            f"TraceId : {d.trace_id}",
        ]
        return "\n".join(lines)
