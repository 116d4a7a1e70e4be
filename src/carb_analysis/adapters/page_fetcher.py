"""Recipe page fetching and visible-text extraction."""

import logging
from dataclasses import dataclass

import httpx
from bs4 import BeautifulSoup

from carb_analysis.services.analysis import PageFetcher

DEFAULT_MAX_PAGE_CHARS = 12_000
DEFAULT_TIMEOUT_SECONDS = 20.0

_USER_AGENT = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) "
    "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)

_HIDDEN_TAGS = ["script", "style", "head", "noscript", "template"]

_logger = logging.getLogger(__name__)


def extract_visible_text(html: str, max_chars: int = DEFAULT_MAX_PAGE_CHARS) -> str:
    """Reduce HTML to collapsed visible text, capped at ``max_chars``."""
    soup = BeautifulSoup(html, "html.parser")
    # innermost first, so nested hidden tags are not decomposed twice
    for tag in reversed(soup.find_all(_HIDDEN_TAGS)):
        tag.decompose()
    text = " ".join(soup.get_text(separator=" ", strip=True).split())
    return text[:max_chars]


def decode_html(content: bytes) -> str:
    """Decode page bytes as UTF-8, falling back to Latin-1."""
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return content.decode("latin-1")


@dataclass
class HttpxPageFetcher(PageFetcher):
    """HTTPX-backed recipe page fetcher."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_chars: int = DEFAULT_MAX_PAGE_CHARS

    @classmethod
    def create(
        cls,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        max_chars: int = DEFAULT_MAX_PAGE_CHARS,
    ) -> "HttpxPageFetcher":
        """Create a fetcher with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(
                follow_redirects=True, headers={"User-Agent": _USER_AGENT}
            ),
            timeout_seconds=timeout_seconds,
            max_chars=max_chars,
        )

    async def fetch_readable_text(self, url: str) -> str:
        """Fetch a page and return its visible text."""
        response = await self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        text = extract_visible_text(decode_html(response.content), self.max_chars)
        _logger.debug("Extracted %s chars from %s", len(text), url)
        return text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
