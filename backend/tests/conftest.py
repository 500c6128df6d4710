"""Shared test configuration and fixtures."""

import pytest

from services.exceptions import ModelProviderError
from services.model_client import ModelClient


class FakeModelClient(ModelClient):
    """Scripted model client.

    `replies` maps a marker substring to either a reply string or an
    exception instance; the first marker found in the prompt wins.
    """

    model_name = "fake-model"

    def __init__(self, replies: dict[str, str | Exception] | None = None, default: str = "") -> None:
        self.replies = replies or {}
        self.default = default
        self.prompts: list[str] = []
        self.timeouts: list[float] = []

    async def invoke(self, prompt: str, timeout: float) -> str:
        self.prompts.append(prompt)
        self.timeouts.append(timeout)
        for marker, reply in self.replies.items():
            if marker in prompt:
                if isinstance(reply, Exception):
                    raise reply
                return reply
        if not self.default:
            raise ModelProviderError("Gemini returned an empty response")
        return self.default


STRONG_REPLY = (
    "FIT_SCORE: 9\n"
    "RISK_SCORE: 2\n"
    "VERDICT: Strong match.\n"
    "REPORT:\n"
    "Alignment: ...\n"
)


@pytest.fixture
def strong_reply() -> str:
    return STRONG_REPLY


@pytest.fixture
def make_client():
    """Factory for scripted clients: make_client(replies={...}, default=...)."""
    return FakeModelClient


@pytest.fixture
def fake_client() -> FakeModelClient:
    return FakeModelClient(default=STRONG_REPLY)
