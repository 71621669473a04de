"""
Inspirational quote provider.

Fetches a random quote from a public REST API using requests, falling back
to a fixed quote whenever the API cannot be used.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from moodjournal.config import (
    FALLBACK_QUOTE_AUTHOR,
    FALLBACK_QUOTE_TEXT,
    QUOTE_API_URL,
    QUOTE_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quote:
    """A quote and its author."""

    text: str
    author: str

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "author": self.author}


FALLBACK_QUOTE = Quote(text=FALLBACK_QUOTE_TEXT, author=FALLBACK_QUOTE_AUTHOR)


class QuoteProvider:
    """
    Client for the random quote endpoint.

    Never raises from fetch_quote(): network errors, bad status codes and
    unexpected payloads all produce the fallback quote.
    """

    def __init__(
        self,
        url: str = QUOTE_API_URL,
        timeout: int = QUOTE_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the quote provider.

        Args:
            url: Endpoint returning a JSON object with "content" and "author".
            timeout: Request timeout in seconds.
            session: Optional session to reuse (one is created otherwise).
        """
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        if "Accept" not in self.session.headers:
            self.session.headers["Accept"] = "application/json"

    def fetch_quote(self) -> Quote:
        """
        Fetch a random quote.

        Returns:
            The fetched quote, or FALLBACK_QUOTE if anything goes wrong.
        """
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            return self._parse_quote(response.json())
        except requests.RequestException as e:
            logger.error(f"Error fetching quote from {self.url}: {e}")
        except ValueError as e:
            logger.error(f"Unexpected quote payload from {self.url}: {e}")

        return FALLBACK_QUOTE

    def _parse_quote(self, data: Any) -> Quote:
        """
        Extract the quote from the API payload.

        Args:
            data: Decoded JSON body.

        Returns:
            The quote.

        Raises:
            ValueError: If the payload does not carry a text and author.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        text = data.get("content")
        author = data.get("author")
        if not isinstance(text, str) or not text.strip():
            raise ValueError("missing 'content'")
        if not isinstance(author, str) or not author.strip():
            raise ValueError("missing 'author'")

        return Quote(text=text.strip(), author=author.strip())

    def close(self) -> None:
        """Close the session and release resources."""
        self.session.close()

    def __enter__(self) -> "QuoteProvider":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
