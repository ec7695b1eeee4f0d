"""Where: src/cddbtool/platform/cddb/http_client.py
What: HTTP adapter fetching raw CDDB responses with ``requests``.
Why: Decouple network concerns from protocol parsing and allow test doubles.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, cast

import requests

from cddbtool.config.settings import HTTP_TIMEOUT
from cddbtool.platform.logging import logger
from cddbtool.shared.errors import CddbTransportError


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response payload relevant to the CDDB client."""

    status: int
    headers: dict[str, str]
    content: bytes


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch raw response bodies."""

    def get_bytes(self, url: str, headers: dict[str, str]) -> HTTPResult:
        """GET ``url``; raise ``CddbTransportError`` on failure."""

        ...


class CddbHTTPClient:
    """Perform single GET requests; failures are raised, never retried."""

    def __init__(self, timeout: tuple[float, float] = HTTP_TIMEOUT) -> None:
        self.timeout: tuple[float, float] = timeout

    def get_bytes(self, url: str, headers: dict[str, str]) -> HTTPResult:
        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise CddbTransportError(f"CDDB request failed: {exc}", url=url) from exc

        status = int(response.status_code)
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}

        if not 200 <= status < 300:
            logger.debug("CDDB HTTP error: status=%s url=%s", status, url)
            raise CddbTransportError(
                f"CDDB server returned HTTP {status}", url=url, status=status
            )

        return HTTPResult(status=status, headers=response_headers, content=response.content)


DEFAULT_HTTP_CLIENT = CddbHTTPClient()


__all__ = [
    "CddbHTTPClient",
    "DEFAULT_HTTP_CLIENT",
    "HTTPClient",
    "HTTPResult",
]
