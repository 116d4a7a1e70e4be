"""Shared test fixtures."""

import json
from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from carb_analysis.config import Settings
from carb_analysis.services.analysis import AnalysisClient, AnalysisService, PageFetcher

MEAL_RESPONSE: dict[str, object] = {
    "noContent": False,
    "components": [
        {
            "description": "Rice",
            "estimatedWeightGrams": 180,
            "carbPercentage": 23,
        },
        {
            "description": "Chicken curry",
            "estimatedWeightGrams": 150,
            "carbPercentage": 6,
            "carbContentGrams": 9,
        },
    ],
    "confidence": 8,
    "mealSummary": "Rice and curry",
}


@dataclass
class FakeAnalysisClient(AnalysisClient):
    """Fake analysis client returning fixed text and recording calls."""

    text: str = field(default_factory=lambda: json.dumps(MEAL_RESPONSE))
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        image_data_urls: Sequence[str],
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "reasoning_effort": reasoning_effort,
                "store": store,
                "prompt": prompt,
                "image_data_urls": list(image_data_urls),
            }
        )
        return self.text


@dataclass
class FakePageFetcher(PageFetcher):
    """Fake page fetcher returning static text."""

    text: str = "Chocolate chip cookies. 250 g flour, 200 g sugar, 2 eggs."
    urls: list[str] = field(default_factory=list)

    async def fetch_readable_text(self, url: str) -> str:
        self.urls.append(url)
        return self.text


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def analysis_client() -> FakeAnalysisClient:
    return FakeAnalysisClient()


@pytest.fixture
def page_fetcher() -> FakePageFetcher:
    return FakePageFetcher()


@pytest.fixture
def analysis_service(
    analysis_client: FakeAnalysisClient, page_fetcher: FakePageFetcher
) -> AnalysisService:
    return AnalysisService(
        client=analysis_client,
        model="gpt-5.2",
        reasoning_effort="medium",
        store=False,
        page_fetcher=page_fetcher,
    )
