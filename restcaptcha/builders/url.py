from __future__ import annotations

from typing import Optional, Union
from urllib.parse import quote, urlsplit, urlunsplit

ParamValue = Union[str, int, None]


def _escape(value: str) -> str:
    # RFC 3986 unreserved characters stay as they are, everything else is encoded
    return quote(value, safe="")


class UrlBuilder:
    """Fluent builder for endpoint URLs.

    Each ``with_*`` call mutates the builder and returns it, so calls chain:

        >>> builder = UrlBuilder("https://api.restcaptcha.eu/v1/")
        >>> builder.with_relative_path("verify").with_parameter("siteKey", "abc").url
        'https://api.restcaptcha.eu/v1/verify?siteKey=abc'

    Parameters with a None, empty or blank value are skipped. A key is not
    de-duplicated; callers append each parameter at most once.
    """

    def __init__(self, base_url: Optional[str]) -> None:
        if base_url is None:
            raise ValueError("base_url is required")
        parts = urlsplit(str(base_url))
        self.scheme = parts.scheme
        self.netloc = parts.netloc
        self.path = parts.path
        self.query = parts.query
        self.fragment = parts.fragment

    def with_relative_path(self, relative_path: str) -> "UrlBuilder":
        if not relative_path:
            return self
        if self.path.endswith("/") or relative_path.startswith("/"):
            self.path = self.path.rstrip("/") + "/" + relative_path.lstrip("/")
        else:
            self.path = f"{self.path}/{relative_path}"
        return self

    def with_parameter(self, key: str, value: ParamValue) -> "UrlBuilder":
        if key is None or not str(key).strip():
            raise ValueError("parameter key must not be empty")
        if value is None:
            return self
        value = str(value)
        if not value.strip():
            return self

        pair = f"{_escape(key)}={_escape(value)}"
        self.query = f"{self.query}&{pair}" if self.query else pair
        return self

    @property
    def url(self) -> str:
        return urlunsplit(
            (self.scheme, self.netloc, self.path, self.query, self.fragment)
        )

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"UrlBuilder({self.url!r})"
