"""Dependency container wiring for the library."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from carb_analysis.adapters.openai_analysis_client import OpenAIAnalysisClient
from carb_analysis.adapters.page_fetcher import HttpxPageFetcher
from carb_analysis.config import Settings
from carb_analysis.services.analysis import AnalysisService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: AnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    openai_client = OpenAIAnalysisClient.create(resolved_settings.openai_api_key)
    page_fetcher = HttpxPageFetcher.create(
        timeout_seconds=resolved_settings.page_fetch_timeout_seconds,
        max_chars=resolved_settings.page_text_max_chars,
    )
    analysis_service = AnalysisService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        page_fetcher=page_fetcher,
        max_response_chars=resolved_settings.max_response_chars,
        debug=resolved_settings.analysis_debug,
    )

    async def close_resources() -> None:
        await openai_client.close()
        await page_fetcher.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
