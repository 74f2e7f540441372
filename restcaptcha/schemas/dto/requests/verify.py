"""
Request DTOs for the verification endpoint.

VerifyRequest — POST {base_url}/verify
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VerifyRequest(BaseModel):
    """Request body for POST /verify.

    Serialised with camelCase keys: siteSecret, token, solution, callerIp.
    The secret and the token are kept out of repr() so the model can be
    logged or shown in tracebacks safely.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    site_secret: str = Field(repr=False)
    token: str = Field(repr=False)
    solution: str
    caller_ip: Optional[str] = None
