"""OpenAI Responses API client for food description analysis."""

from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from nutrition_diary.domain.errors import AnalysisUnavailableError
from nutrition_diary.services.analysis import AnalysisClient


@dataclass
class OpenAIAnalysisClient(AnalysisClient):
    """Analysis client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIAnalysisClient":
        """Create an OpenAI analysis client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(self, *, model: str, prompt: str, max_output_tokens: int) -> str:
        """Call OpenAI Responses API with a plain text prompt."""
        try:
            response = await self.client.responses.create(
                model=model,
                input=[{"role": "user", "content": prompt}],
                max_output_tokens=max_output_tokens,
                store=False,
            )
        except OpenAIError as exc:
            raise AnalysisUnavailableError(f"OpenAI request failed: {exc}") from exc
        output_text = response.output_text
        if not output_text or not output_text.strip():
            raise AnalysisUnavailableError("OpenAI returned an empty response")
        return output_text.strip()
