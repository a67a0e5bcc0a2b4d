from typing import Dict, Optional

import httpx
from loguru import logger

from power_report.config.settings import settings


class PowerReportError(Exception):
    """Base exception for every failure of a report run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.contexts: list[str] = []

    def with_context(self, context: str) -> "PowerReportError":
        """Prefixes the message with what was being attempted; returns self."""
        self.contexts.insert(0, context)
        return self

    def __str__(self) -> str:
        return ": ".join([*self.contexts, self.message])


class NetworkError(PowerReportError):
    """The request could not be sent or timed out."""

    pass


class HttpStatusError(PowerReportError):
    """The server answered with a status outside 200-299."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"unsuccessful HTTP status {status_code} for {url}")
        self.url = url
        self.status_code = status_code


class BodyReadError(PowerReportError):
    """The response body could not be decoded as text."""

    pass


class ParseError(PowerReportError):
    """JSON was malformed or did not match the expected shape."""

    pass


def build_client() -> httpx.Client:
    """HTTP client with the configured timeout and browser User-Agent."""
    return httpx.Client(
        timeout=httpx.Timeout(settings.request_timeout),
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )


class BaseScraper:
    """Synchronous nba.com client shared by the rankings and schedule scrapers."""

    def __init__(self, client: Optional[httpx.Client] = None):
        self._owns_client = client is None
        self.client = client or build_client()

    def fetch_text(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        """GETs ``url`` and returns the decoded body.

        Raises:
            NetworkError: the request could not be sent or timed out.
            HttpStatusError: the response status is not 2xx.
            BodyReadError: the body could not be read or decoded.
        """
        response = self._make_request(url, headers=headers)
        try:
            response.read()
            return response.text
        except (httpx.DecodingError, httpx.ReadError, httpx.ReadTimeout) as e:
            logger.debug(f"Body read error for {url}: {e!r}")
            raise BodyReadError(f"failed to read response body from {url}") from e
        finally:
            response.close()

    def _make_request(
        self, url: str, headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """Sends the GET and checks the status; the body is left unread."""
        request_headers = {"User-Agent": settings.user_agent}
        request_headers.update(headers or {})
        logger.debug(f"GET {url}")
        request = self.client.build_request("GET", url, headers=request_headers)
        try:
            response = self.client.send(request, stream=True)
        except httpx.DecodingError as e:
            raise BodyReadError(f"failed to read response body from {url}") from e
        except httpx.RequestError as e:
            logger.debug(f"Request error for {url}: {e!r}")
            raise NetworkError(f"HTTP request to {url} failed") from e

        if not response.is_success:
            response.close()
            logger.debug(f"HTTP {response.status_code} for {url}")
            raise HttpStatusError(url, response.status_code)

        logger.debug(f"Request successful: {response.status_code} for {url}")
        return response

    def close(self) -> None:
        """Closes the underlying HTTP client if this scraper created it."""
        if self._owns_client:
            self.client.close()
            logger.debug(f"Closed HTTP client for {type(self).__name__}")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
