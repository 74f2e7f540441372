"""RESTCaptcha API client.

ApiClient checks a token/solution pair produced by the RESTCaptcha widget
against the verification endpoint and returns the VerifyStatus.

Errors are not translated here: transport failures (after retries),
unsuccessful status codes, ProblemDetailsError and cancellation all reach
the caller as raised by the transport stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import httpx

from restcaptcha.builders.url import UrlBuilder
from restcaptcha.infrastructure.factory import create_rest_client
from restcaptcha.infrastructure.http_client import HttpRestClient, RestClient
from restcaptcha.schemas.dto.requests.verify import VerifyRequest
from restcaptcha.schemas.dto.responses.verify import VerifyResponse, VerifyStatus

if TYPE_CHECKING:
    from restcaptcha.config import RestCaptchaSettings

VERIFY_PATH = "verify"


class ApiClient:
    """
    Client for the RESTCaptcha API.

    Exactly one way of reaching the API is used:
    - ``rest_client``: any RestClient implementation, used as-is
    - ``http_client``: an httpx.AsyncClient, wrapped in an HttpRestClient
    - neither: the default stack from create_rest_client() (retries, problem
      details, User-Agent)

    Only a client created here is closed by aclose(); a caller-supplied
    rest_client or http_client stays the caller's to close unless
    ``owns_rest_client`` hands the rest_client over.
    """

    def __init__(
        self,
        base_url: str,
        site_key: str,
        site_secret: str,
        language: Optional[str] = None,
        *,
        rest_client: Optional[RestClient] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        owns_rest_client: bool = False,
    ) -> None:
        if rest_client is not None and http_client is not None:
            raise ValueError("pass either rest_client or http_client, not both")

        self._base_url = base_url
        self._site_key = site_key
        self._site_secret = site_secret
        self._language = language

        self._owned: Optional[Any] = None
        if rest_client is not None:
            self._rest_client: RestClient = rest_client
            if owns_rest_client:
                self._owned = rest_client
        elif http_client is not None:
            self._rest_client = HttpRestClient(http_client)
        else:
            self._owned = create_rest_client()
            self._rest_client = self._owned

    @classmethod
    def from_settings(cls, settings: "RestCaptchaSettings", **kwargs: Any) -> "ApiClient":
        """Build a client from RestCaptchaSettings.

        Without an explicit rest_client/http_client the default stack honours
        the configured timeout and retry budget.
        """
        if "rest_client" not in kwargs and "http_client" not in kwargs:
            kwargs["rest_client"] = create_rest_client(
                timeout=settings.timeout_seconds, max_retries=settings.max_retries
            )
            kwargs["owns_rest_client"] = True
        return cls(
            settings.base_url,
            settings.site_key,
            settings.site_secret.get_secret_value(),
            settings.language,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def site_key(self) -> str:
        return self._site_key

    @property
    def language(self) -> Optional[str]:
        return self._language

    def verify_url(self) -> str:
        return (
            UrlBuilder(self._base_url)
            .with_relative_path(VERIFY_PATH)
            .with_parameter("siteKey", self._site_key)
            .with_parameter("language", self._language)
            .url
        )

    async def verify_solution(
        self, token: str, solution: str, caller_ip: Optional[str] = None
    ) -> VerifyStatus:
        """
        Verify a solution with the server and return the verification status.

        Args:
            token: The RESTCaptcha token received from the widget
            solution: The user-submitted solution to the challenge
            caller_ip: IP address of the end user, if known

        Returns:
            The status field of the verify response

        Cancel the awaiting task to abort an in-flight request or backoff.
        """
        request = VerifyRequest(
            site_secret=self._site_secret,
            token=token,
            solution=solution,
            caller_ip=caller_ip,
        )
        response = await self._rest_client.post(
            self.verify_url(), request, VerifyResponse
        )
        return response.status

    verify = verify_solution

    async def aclose(self) -> None:
        if self._owned is not None:
            await self._owned.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"ApiClient(base_url={self._base_url!r}, site_key={self._site_key!r})"
