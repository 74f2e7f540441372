"""
Unit test configuration.

Runs every test from an empty temporary directory with no RESTCAPTCHA_*
variables set, so pydantic-settings never reads a developer's real .env file
or environment. Tests control config exclusively through monkeypatch.setenv().
"""

import json
import os

import httpx
import pytest


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("RESTCAPTCHA_"):
            monkeypatch.delenv(name)


class RecordingHandler:
    """httpx.MockTransport handler replaying a scripted list of outcomes.

    Each outcome is an httpx.Response or an exception instance to raise.
    The last outcome repeats once the script runs out.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def calls(self) -> int:
        return len(self.requests)


def json_response(status_code: int, body, content_type="application/json"):
    return httpx.Response(
        status_code,
        content=json.dumps(body).encode(),
        headers={"content-type": content_type},
    )


def problem_response(status_code: int, body):
    return json_response(status_code, body, content_type="application/problem+json")


class SleepRecorder:
    """Stands in for asyncio.sleep so backoff delays are recorded, not waited."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()
