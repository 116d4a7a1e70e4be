"""OpenAI Responses API client for carb analysis."""

from collections.abc import Sequence
from dataclasses import dataclass

from openai import AsyncOpenAI

from carb_analysis.services.analysis import AnalysisClient


@dataclass
class OpenAIAnalysisClient(AnalysisClient):
    """Analysis client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIAnalysisClient":
        """Create an OpenAI analysis client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        image_data_urls: Sequence[str],
    ) -> str:
        """Call OpenAI Responses API and return the raw output text.

        Output is plain text on purpose; the decoder tolerates fences and drift.
        """
        content: list[dict[str, object]] = [
            {"type": "input_image", "image_url": url} for url in image_data_urls
        ]
        content.append({"type": "input_text", "text": prompt})
        request_payload: dict[str, object] = {
            "model": model,
            "input": [{"role": "user", "content": content}],
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
