"""Default transport stack for the API client.

    httpx.AsyncHTTPTransport -> ProblemDetailsTransport -> RetryTransport

wrapped in an httpx.AsyncClient that identifies itself with a
``User-Agent: restcaptcha-client/<version>`` header and follows redirects,
so an http -> https 307/308 from the API is not reported as a failure.
"""

from typing import Optional

import httpx

from restcaptcha.infrastructure.http_client import HttpRestClient
from restcaptcha.infrastructure.problem_details import ProblemDetailsTransport
from restcaptcha.infrastructure.retry import DEFAULT_MAX_RETRIES, RetryTransport
from restcaptcha.shared.agent import user_agent as default_user_agent
from restcaptcha.shared.logging import get_logger

log = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def create_transport(
    transport: Optional[httpx.AsyncBaseTransport] = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> RetryTransport:
    """Compose the problem details and retry layers around a base transport."""
    base = transport if transport is not None else httpx.AsyncHTTPTransport()
    return RetryTransport(ProblemDetailsTransport(base), max_retries=max_retries)


def create_rest_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    max_retries: int = DEFAULT_MAX_RETRIES,
    user_agent: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> HttpRestClient:
    """
    Build the default RestClient.

    Args:
        timeout: Per-attempt timeout in seconds
        max_retries: Retries after the first attempt for transient failures
        user_agent: Overrides the default agent name/version header
        transport: Base transport, e.g. httpx.MockTransport in tests

    Returns:
        HttpRestClient owning a new httpx.AsyncClient
    """
    agent = user_agent or default_user_agent()
    http_client = httpx.AsyncClient(
        transport=create_transport(transport, max_retries=max_retries),
        timeout=timeout,
        follow_redirects=True,
        headers={"User-Agent": agent},
    )
    log.debug(
        "restcaptcha_rest_client_created",
        user_agent=agent,
        timeout=timeout,
        max_retries=max_retries,
    )
    return HttpRestClient(http_client)
