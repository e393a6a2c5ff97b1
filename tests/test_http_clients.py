"""Tests for the OpenAI analysis adapter."""

import asyncio

import httpx
import openai
import pytest

from nutrition_diary.adapters.openai_analysis_client import OpenAIAnalysisClient
from nutrition_diary.domain.errors import AnalysisUnavailableError


class _FakeResponses:
    def __init__(self, output_text: str = "", error: Exception | None = None) -> None:
        self.output_text = output_text
        self.error = error
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        if self.error is not None:
            raise self.error
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, responses: _FakeResponses) -> None:
        self.responses = responses


def test_openai_analysis_client_returns_text() -> None:
    responses = _FakeResponses(output_text="  ~450 kcal, 20P/15F/50C \n")
    client = OpenAIAnalysisClient(client=_FakeOpenAI(responses))

    result = asyncio.run(
        client.complete(model="gpt-4o-mini", prompt="Estimate", max_output_tokens=100)
    )

    assert result == "~450 kcal, 20P/15F/50C"
    assert responses.last_payload is not None
    assert responses.last_payload["max_output_tokens"] == 100
    assert responses.last_payload["model"] == "gpt-4o-mini"


def test_openai_analysis_client_empty_output_raises() -> None:
    client = OpenAIAnalysisClient(client=_FakeOpenAI(_FakeResponses(output_text="")))

    with pytest.raises(AnalysisUnavailableError):
        asyncio.run(
            client.complete(
                model="gpt-4o-mini", prompt="Estimate", max_output_tokens=50
            )
        )


def test_openai_analysis_client_wraps_api_errors() -> None:
    request = httpx.Request("POST", "https://api.openai.com/v1/responses")
    error = openai.APIConnectionError(request=request)
    client = OpenAIAnalysisClient(client=_FakeOpenAI(_FakeResponses(error=error)))

    with pytest.raises(AnalysisUnavailableError):
        asyncio.run(
            client.complete(
                model="gpt-4o-mini", prompt="Estimate", max_output_tokens=50
            )
        )
