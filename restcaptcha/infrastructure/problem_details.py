"""Transport that turns application/problem+json error responses into exceptions.

Sits directly above the network transport. Successful responses and error
responses without a parseable problem body pass through untouched, so the
regular status handling (raise_for_status) still reports them.
"""

import httpx
from pydantic import ValidationError

from restcaptcha.errors import ProblemDetailsError
from restcaptcha.schemas.dto.responses.problem import (
    PROBLEM_JSON_MEDIA_TYPE,
    ProblemDetails,
)


def is_problem_response(response: httpx.Response) -> bool:
    if response.is_success:
        return False
    content_type = response.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type.startswith(PROBLEM_JSON_MEDIA_TYPE)


class ProblemDetailsTransport(httpx.AsyncBaseTransport):
    def __init__(self, transport: httpx.AsyncBaseTransport) -> None:
        self._transport = transport

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = await self._transport.handle_async_request(request)
        if not is_problem_response(response):
            return response

        await response.aread()
        try:
            details = ProblemDetails.model_validate_json(response.content)
        except ValidationError:
            return response
        raise ProblemDetailsError(details)

    async def aclose(self) -> None:
        await self._transport.aclose()
