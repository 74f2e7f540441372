"""Retry transport: tenacity-based exponential backoff for the API client.

Wraps the problem details transport and retries transient failures:
- Connection-level transport errors (refused, reset, DNS, timeouts)
- 408 Request Timeout and 503 Service Unavailable responses

Every other outcome, including ProblemDetailsError, is final on the first
attempt. The wait before retry n (counting from 1) is 2**n seconds, without
jitter. When the budget is exhausted the last exception is re-raised, or the
last retryable response is handed back for regular status handling.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from restcaptcha.shared.logging import get_logger

log = get_logger(__name__)

DEFAULT_MAX_RETRIES = 5
RETRYABLE_STATUS_CODES = frozenset({408, 503})

# Connection-level failures only; UnsupportedProtocol, LocalProtocolError and
# ProxyError are configuration problems and fail on the first attempt
RETRYABLE_EXCEPTIONS = (
    httpx.NetworkError,
    httpx.TimeoutException,
    httpx.RemoteProtocolError,
)


def is_retryable_response(response: Any) -> bool:
    return getattr(response, "status_code", None) in RETRYABLE_STATUS_CODES


def exponential_wait() -> wait_base:
    # tenacity computes multiplier * 2 ** (attempt - 1), i.e. 2, 4, 8, ...
    return wait_exponential(multiplier=2, exp_base=2)


def _last_outcome(retry_state: RetryCallState) -> httpx.Response:
    # re-raises the last exception, or returns the last retryable response
    return retry_state.outcome.result()


class RetryTransport(httpx.AsyncBaseTransport):
    def __init__(
        self,
        transport: httpx.AsyncBaseTransport,
        max_retries: int = DEFAULT_MAX_RETRIES,
        wait: Optional[wait_base] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")
        self._transport = transport
        self._max_retries = max_retries
        self._wait = wait if wait is not None else exponential_wait()
        self._sleep = sleep

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def _retrying(self, request: httpx.Request) -> AsyncRetrying:
        def log_retry(retry_state: RetryCallState) -> None:
            outcome = retry_state.outcome
            reason: dict[str, Any]
            if outcome.failed:
                reason = {"error_type": type(outcome.exception()).__name__}
            else:
                reason = {"status_code": outcome.result().status_code}
            log.warning(
                "restcaptcha_retry_scheduled",
                method=request.method,
                path=request.url.path,
                attempt=retry_state.attempt_number,
                max_retries=self._max_retries,
                delay_seconds=retry_state.next_action.sleep,
                **reason,
            )

        return AsyncRetrying(
            stop=stop_after_attempt(self._max_retries + 1),
            wait=self._wait,
            retry=(
                retry_if_exception_type(RETRYABLE_EXCEPTIONS)
                | retry_if_result(is_retryable_response)
            ),
            sleep=self._sleep,
            before_sleep=log_retry,
            retry_error_callback=_last_outcome,
            reraise=True,
        )

    async def _send_once(self, request: httpx.Request) -> httpx.Response:
        response = await self._transport.handle_async_request(request)
        if is_retryable_response(response):
            # read to completion so the connection is released before a retry
            await response.aread()
        return response

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._retrying(request)(self._send_once, request)

    async def aclose(self) -> None:
        await self._transport.aclose()

