"""Carb analysis service that prompts an LLM and decodes its answer."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from carb_analysis.domain.analysis import AnalysisOutcome
from carb_analysis.domain.profiles import MEAL_PROFILE, RECIPE_PROFILE, SchemaProfile
from carb_analysis.services.decoder import DEFAULT_MAX_RESPONSE_CHARS, decode_response
from carb_analysis.services.images import encode_images, to_data_url
from carb_analysis.services.prompts import (
    build_meal_prompt,
    build_recipe_link_prompt,
    build_recipe_photo_prompt,
)
from carb_analysis.services.sanitizer import sanitize_response_text

MAX_MEAL_IMAGES = 3

_logger = logging.getLogger(__name__)


class AnalysisClient(Protocol):
    """Interface for multimodal LLM text generation."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        image_data_urls: Sequence[str],
    ) -> str:
        """Return the raw text answer of the model."""


class PageFetcher(Protocol):
    """Interface for turning a recipe URL into readable text."""

    async def fetch_readable_text(self, url: str) -> str:
        """Return visible page text."""


@dataclass(frozen=True)
class AnalysisReport:
    """Raw model text alongside its decoded outcome."""

    raw_text: str
    sanitized_text: str
    outcome: AnalysisOutcome


@dataclass
class AnalysisService:
    """Service that builds prompts, calls the model and decodes results."""

    client: AnalysisClient
    model: str
    reasoning_effort: str | None
    store: bool
    page_fetcher: PageFetcher | None = None
    max_response_chars: int = DEFAULT_MAX_RESPONSE_CHARS
    debug: bool = False

    async def analyze_meal(
        self, images: Sequence[bytes], user_note: str | None = None
    ) -> AnalysisReport:
        """Estimate net carbs for a meal photographed from several angles."""
        data_urls = encode_images(images, MAX_MEAL_IMAGES)
        return await self._run(build_meal_prompt(user_note), data_urls, MEAL_PROFILE)

    async def analyze_recipe_photo(self, image: bytes) -> AnalysisReport:
        """Estimate net carbs for a photographed recipe."""
        return await self._run(
            build_recipe_photo_prompt(), [to_data_url(image)], RECIPE_PROFILE
        )

    async def analyze_recipe_link(self, url: str) -> AnalysisReport:
        """Estimate net carbs for a recipe web page."""
        if self.page_fetcher is None:
            raise RuntimeError("Recipe link analysis requires a page fetcher")
        page_text = await self.page_fetcher.fetch_readable_text(url)
        if self.debug:
            _logger.info("Fetched recipe page: url=%s chars=%s", url, len(page_text))
        return await self._run(build_recipe_link_prompt(page_text), [], RECIPE_PROFILE)

    async def _run(
        self, prompt: str, data_urls: list[str], profile: SchemaProfile
    ) -> AnalysisReport:
        raw_text = await self.client.generate(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=prompt,
            image_data_urls=data_urls,
        )
        if self.debug:
            _logger.info(
                "Model response: profile=%s chars=%s", profile.name, len(raw_text)
            )
        outcome = decode_response(
            raw_text, profile, max_chars=self.max_response_chars
        )
        return AnalysisReport(
            raw_text=raw_text,
            sanitized_text=sanitize_response_text(raw_text),
            outcome=outcome,
        )
