"""
Request builders.

UrlBuilder composes API endpoint URLs from a base URL, a relative path and
query parameters.
"""

from .url import UrlBuilder

__all__ = [
    "UrlBuilder",
]
