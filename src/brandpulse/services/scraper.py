"""Content acquisition from review sites and Reddit threads."""

import json
import logging
from typing import Any, List
from urllib.parse import urlsplit, urlunsplit

import requests

from ..core.config import Settings
from ..core.constants import ErrorConstants, ScrapeConstants
from ..core.exceptions import FetchError
from ..core.sources import is_discussion_url

logger = logging.getLogger(__name__)


def _read_json(response: requests.Response, service: str) -> Any:
    """Decode a response body, turning anything unreadable into FetchError."""
    try:
        return response.json()
    except ValueError as e:
        raise FetchError(
            f"{service} returned invalid JSON (HTTP {response.status_code}): {e}"
        ) from e


def thread_json_url(url: str) -> str:
    """Map a Reddit thread URL to its JSON endpoint.

    Query string and fragment are dropped, so share links such as
    ``.../comments/abc/title/?utm_source=share`` resolve to the thread.
    """
    parts = urlsplit(url)
    path = parts.path[:-1] if parts.path.endswith("/") else parts.path
    return urlunsplit((parts.scheme, parts.netloc, path + ScrapeConstants.REDDIT_JSON_SUFFIX, "", ""))


def format_thread(listing: Any) -> str:
    """Flatten a Reddit thread listing into one text blob.

    ``listing`` is the two-element array returned by the thread endpoint:
    the post listing followed by the comment listing.
    """
    if not isinstance(listing, list) or not listing:
        raise FetchError("Unexpected Reddit response shape: expected a two-element array")

    try:
        return _flatten_thread(listing)
    except (AttributeError, IndexError, KeyError, TypeError) as e:
        raise FetchError(f"Unexpected Reddit response shape: {e!r}") from e


def _flatten_thread(listing: list) -> str:
    post_children = (listing[0].get("data") or {}).get("children") or []
    post = (post_children[0].get("data") or {}) if post_children else {}
    comment_children = []
    if len(listing) > 1:
        comment_children = (listing[1].get("data") or {}).get("children") or []

    bodies: List[str] = []
    for child in comment_children:
        body = (child.get("data") or {}).get("body")
        if body:
            bodies.append(body)

    title = post.get("title") or ""
    selftext = post.get("selftext") or ""
    comment_text = "\n\n".join(bodies)
    return f"POST: {title}\n\n{selftext}\n\nCOMMENTS:\n{comment_text}"


class RedditThreadClient:
    """Reads a thread through Reddit's public JSON endpoint."""

    def __init__(self, settings: Settings):
        self.headers = {"User-Agent": settings.reddit_user_agent}
        self.timeout = settings.request_timeout

    def fetch(self, url: str) -> str:
        json_url = thread_json_url(url)
        try:
            response = requests.get(
                json_url,
                headers=self.headers,
                params={"limit": ScrapeConstants.REDDIT_COMMENT_LIMIT},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Reddit request failed: {e}") from e

        return format_thread(_read_json(response, "Reddit"))


class FirecrawlClient:
    """Client for the Firecrawl scrape endpoint."""

    def __init__(self, settings: Settings):
        self.api_url = settings.firecrawl_api_url
        self.headers = {
            "Authorization": f"Bearer {settings.firecrawl_api_key}",
            "Content-Type": "application/json",
        }
        self.timeout = settings.request_timeout

    def fetch(self, url: str) -> str:
        payload = {
            "url": url,
            "formats": ScrapeConstants.FIRECRAWL_FORMATS,
            "onlyMainContent": True,
        }
        try:
            response = requests.post(
                self.api_url,
                headers=self.headers,
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise FetchError(f"Firecrawl request failed: {e}") from e

        data = _read_json(response, "Firecrawl")
        if not isinstance(data, dict) or not data.get("success"):
            detail = json.dumps(data)[:ErrorConstants.MAX_ERROR_PAYLOAD]
            raise FetchError(f"Firecrawl error: {detail}")

        if not response.ok:
            raise FetchError(f"Firecrawl returned HTTP {response.status_code}")

        content = data.get("data") or {}
        if not isinstance(content, dict):
            raise FetchError(f"Unexpected Firecrawl response shape: data is {type(content).__name__}")
        markdown = content.get("markdown") or ""
        if not isinstance(markdown, str):
            raise FetchError(f"Unexpected Firecrawl response shape: markdown is {type(markdown).__name__}")
        return markdown


class ContentFetcher:
    """Routes a URL to the right acquisition path and returns its text."""

    def __init__(self, settings: Settings):
        self.reddit = RedditThreadClient(settings)
        self.firecrawl = FirecrawlClient(settings)

    def fetch(self, url: str) -> str:
        logger.info(f"🔍 Scraping: {url}")
        if is_discussion_url(url):
            text = self.reddit.fetch(url)
        else:
            text = self.firecrawl.fetch(url)
        logger.info(f"✅ Extracted {len(text)} characters")
        return text
