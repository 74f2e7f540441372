"""Typed JSON-over-HTTP client used by the API client.

RestClient is the protocol the ApiClient depends on; HttpRestClient is the
httpx implementation. Tests substitute either the protocol or the httpx
transport underneath it.
"""

from typing import Any, Protocol, TypeVar

import httpx
from pydantic import BaseModel

TResult = TypeVar("TResult", bound=BaseModel)

JSON_MEDIA_TYPE = "application/json"


class RestClient(Protocol):
    async def post(
        self, url: str, content: BaseModel, result_type: type[TResult]
    ) -> TResult: ...


class HttpRestClient:
    """RestClient over an httpx.AsyncClient.

    Request bodies are serialised with their camelCase aliases and responses
    are parsed into ``result_type``. A non-success status that got past the
    transport stack raises httpx.HTTPStatusError.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._client = http_client

    async def post(
        self, url: str, content: BaseModel, result_type: type[TResult]
    ) -> TResult:
        response = await self._client.post(
            url,
            json=content.model_dump(mode="json", by_alias=True),
            headers={"Accept": JSON_MEDIA_TYPE},
        )
        response.raise_for_status()
        return result_type.model_validate_json(response.content)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpRestClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
