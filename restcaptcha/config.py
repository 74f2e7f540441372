"""
Client configuration via pydantic-settings.

Settings are optional: the ApiClient can be built from plain arguments.
RestCaptchaSettings reads RESTCAPTCHA_* environment variables (and a .env
file) for applications that prefer to configure the client that way, e.g.

    RESTCAPTCHA_BASE_URL=https://api.restcaptcha.eu/v1/
    RESTCAPTCHA_SITE_KEY=...
    RESTCAPTCHA_SITE_SECRET=...
"""

from __future__ import annotations

from typing import Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RestCaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RESTCAPTCHA_", env_file=".env", extra="ignore"
    )

    base_url: str
    site_key: str
    site_secret: SecretStr

    # Language code for server-side message translation; omitted when unset
    language: Optional[str] = None

    timeout_seconds: float = 10.0
    max_retries: int = 5

    @field_validator("language", mode="before")
    @classmethod
    def _blank_language_is_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("max_retries")
    @classmethod
    def _non_negative_retries(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_retries must not be negative")
        return v
