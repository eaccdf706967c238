"""Request manager for downloading the cheat sheet page.

This module provides SyncRequestManager, which encapsulates the HTTP client
and turns transport problems into TransientException subclasses. The
extractor itself never performs I/O; callers fetch the page text here and hand them
to ``emojisheet.extraction.parse``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from emojisheet.common.exceptions import (
    HTMLResponseAssumptionException,
    RequestFailedException,
    RequestTimeoutException,
)

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://www.webfx.com/tools/emoji-cheat-sheet/"


class SyncRequestManager:
    """Manages HTTP requests for the pipeline.

    Example::

        with SyncRequestManager(timeout=30.0) as manager:
            content = manager.fetch(DEFAULT_URL)
    """

    def __init__(
        self,
        timeout: float | None = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the request manager.

        Args:
            timeout: Request timeout in seconds. None means no timeout.
            transport: Optional httpx transport, mainly for tests.
        """
        self.timeout = timeout

        client_kwargs: dict[str, Any] = {
            "timeout": timeout,
            "follow_redirects": True,
            "default_encoding": "utf-8",
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> SyncRequestManager:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()

    def fetch(self, url: str) -> str:
        """Download ``url`` and return the response body as text.

        Args:
            url: Absolute URL to fetch.

        Returns:
            The body decoded with the charset from the Content-Type header,
            or UTF-8 when the header names none.

        Raises:
            HTMLResponseAssumptionException: If the status code isn't 200.
            RequestTimeoutException: If the request times out.
            RequestFailedException: On any other transport error.
        """
        logger.info(f"Downloading {url}")
        try:
            http_response = self._client.get(url)
        except httpx.TimeoutException as e:
            raise RequestTimeoutException(
                url=url, timeout_seconds=self.timeout
            ) from e
        except httpx.TransportError as e:
            raise RequestFailedException(url=url, reason=str(e)) from e

        if http_response.status_code != 200:
            raise HTMLResponseAssumptionException(
                status_code=http_response.status_code,
                expected_codes=[200],
                url=url,
            )

        logger.debug(
            f"Received {len(http_response.content)} bytes from {url}"
        )
        return http_response.text
