"""HTTP transport for the Hacker News API.

The fetcher only needs ``fetch_text(url) -> str``. Anything implementing the
``TextFetcher`` protocol can be injected; ``HttpxTextFetcher`` is the default.
"""

from typing import Optional, Protocol

import httpx

from hackernews_top.scraper.errors import TransportError
from hackernews_top.utils.config import get_settings
from hackernews_top.utils.logging_config import get_logger


class TextFetcher(Protocol):
    """Async GET returning the response body as text."""

    async def fetch_text(self, url: str) -> str:
        """Fetch ``url`` and return its body.

        Raises:
            TransportError: On network failure, timeout or non-2xx status
        """
        ...


class HttpxTextFetcher:
    """``TextFetcher`` backed by ``httpx.AsyncClient``.

    Usage:
        async with HttpxTextFetcher() as http:
            body = await http.fetch_text(url)

    When no client is passed one is created on entry and closed on exit.
    A caller-supplied client is never closed here.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        """Initialize the transport.

        Args:
            client: Existing client to reuse (tests pass one with a MockTransport)
            timeout: Request timeout in seconds, defaults to API_TIMEOUT
            user_agent: User-Agent header, defaults to USER_AGENT
        """
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.user_agent = user_agent or settings.USER_AGENT
        self._client = client
        self._owns_client = client is None
        self._logger = get_logger(__name__)

    async def __aenter__(self) -> "HttpxTextFetcher":
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_text(self, url: str) -> str:
        """GET ``url`` and return the decoded body.

        Args:
            url: Absolute URL to fetch

        Returns:
            Response body text

        Raises:
            TransportError: If the request fails or the status is not 2xx
        """
        if self._client is None:
            raise RuntimeError("HttpxTextFetcher must be used as an async context manager")

        self._logger.debug("GET %s", url, extra={"url": url})
        try:
            response = await self._client.get(url, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP {e.response.status_code} from {url}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e

        return response.text
