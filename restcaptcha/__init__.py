"""
RESTCaptcha API client.

    async with ApiClient(base_url, site_key, site_secret) as client:
        status = await client.verify_solution(token, solution, caller_ip)
"""

from .client import ApiClient
from .config import RestCaptchaSettings
from .errors import ProblemDetailsError, RestCaptchaError
from .infrastructure.factory import create_rest_client
from .infrastructure.http_client import HttpRestClient, RestClient
from .schemas.dto.requests.verify import VerifyRequest
from .schemas.dto.responses.problem import ProblemDetails
from .schemas.dto.responses.verify import VerifyResponse, VerifyStatus
from .shared.agent import get_version

__version__ = get_version()

__all__ = [
    "ApiClient",
    "HttpRestClient",
    "ProblemDetails",
    "ProblemDetailsError",
    "RestCaptchaError",
    "RestCaptchaSettings",
    "RestClient",
    "VerifyRequest",
    "VerifyResponse",
    "VerifyStatus",
    "create_rest_client",
]
