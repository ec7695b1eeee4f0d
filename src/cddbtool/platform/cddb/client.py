"""Where: src/cddbtool/platform/cddb/client.py
What: Facade issuing CDDB query and read commands over HTTP.
Why: Combine command building, transport, decoding and parsing behind two calls.

The client delegates to focused helpers:
- ``commands`` builds command strings and the request URL
- ``http_client`` performs the GET through ``requests``
- ``encoding`` resolves the response charset with a UTF-8 fallback
- ``response`` parses the status line, body and match list
"""

from __future__ import annotations

from typing import final

from cddbtool.config.settings import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_PROTO_LEVEL,
    DEFAULT_RESPONSE_ENCODING,
)
from cddbtool.features.disc.domain.disc_id import compute_disc_id
from cddbtool.features.disc.domain.toc import TableOfContents
from cddbtool.features.xmcd.domain.models import CddbMatch, XmcdRecord
from cddbtool.features.xmcd.domain.parser import parse_xmcd_record
from cddbtool.platform.logging import logger
from cddbtool.shared.errors import IdentityValidationError

from .commands import (
    build_hello_param,
    build_query_command,
    build_read_command,
    build_request_url,
)
from .encoding import EncodingResolution, resolve_encoding
from .http_client import DEFAULT_HTTP_CLIENT, HTTPClient
from .response import CddbResponse, parse_response
from .user_agent import format_user_agent


def _require(value: str | None, name: str) -> str:
    if value is None or not value.strip():
        raise IdentityValidationError(f"{name} must be provided")
    return value


@final
class CddbClient:
    """Client for a FreeDB-compatible CGI endpoint.

    Args:
        cgi_base: CGI URL, e.g. ``http://gnudb.gnudb.org/~cddb/cddb.cgi``.
        user: Hello user name (required).
        host: Hello host name (required).
        app_name: Client name sent in hello and User-Agent.
        app_version: Client version sent in hello and User-Agent.
        proto_level: CDDB protocol level.
        encoding: Response charset; unknown names fall back to UTF-8.
        http_client: Transport override, mainly for tests.

    Raises:
        IdentityValidationError: If ``cgi_base``, ``user`` or ``host`` is blank.
    """

    def __init__(
        self,
        cgi_base: str,
        user: str | None,
        host: str | None,
        *,
        app_name: str = APP_NAME,
        app_version: str = APP_VERSION,
        proto_level: int = DEFAULT_PROTO_LEVEL,
        encoding: str = DEFAULT_RESPONSE_ENCODING,
        http_client: HTTPClient | None = None,
    ) -> None:
        self.cgi_base: str = _require(cgi_base, "cgi_base").strip()
        self.user: str = _require(user, "user")
        self.host: str = _require(host, "host")
        self.app_name: str = app_name
        self.app_version: str = app_version
        self.proto_level: int = proto_level
        self.hello_param: str = build_hello_param(self.user, self.host, app_name, app_version)
        self.user_agent: str = format_user_agent(app_name, app_version)
        self._http: HTTPClient = http_client or DEFAULT_HTTP_CLIENT

        self.encoding_resolution: EncodingResolution = resolve_encoding(encoding)
        if self.encoding_resolution.fell_back:
            logger.warning(
                "Unknown response encoding %r; falling back to %s",
                encoding,
                self.encoding_resolution.name,
            )

    @property
    def encoding(self) -> str:
        return self.encoding_resolution.name

    def build_url(self, command: str) -> str:
        """Return the request URL for ``command``."""

        return build_request_url(self.cgi_base, command, self.hello_param, self.proto_level)

    def send_command(self, command: str) -> CddbResponse:
        """Send ``command`` and parse the decoded response.

        Raises:
            CddbTransportError: On connection failure or a non-2xx status.
        """

        url = self.build_url(command)
        logger.debug("CDDB request: %s", url)
        result = self._http.get_bytes(url, {"User-Agent": self.user_agent})
        text = result.content.decode(self.encoding, errors="replace")
        response = parse_response(text)
        logger.debug(
            "CDDB response: %s %s (%d body lines)",
            response.status_code,
            response.status_message,
            len(response.body_lines),
        )
        return response

    def query(self, toc: TableOfContents) -> list[CddbMatch]:
        """Look up ``toc``; an empty list means no match.

        Raises:
            InvalidTocError: If the TOC holds no tracks.
            CddbTransportError: On transport failure.
        """

        disc_id = compute_disc_id(toc)
        logger.info(
            "Querying CDDB for disc %s (%d tracks, %d seconds)",
            disc_id,
            toc.track_count,
            toc.total_seconds,
            extra={"lookup_event": "lookup.query.start", "disc_id": disc_id},
        )
        response = self.send_command(build_query_command(disc_id, toc))
        matches = response.matches()
        if matches:
            logger.info(
                "Found %d match(es)",
                len(matches),
                extra={"lookup_event": "lookup.query.matches", "disc_id": disc_id},
            )
        else:
            logger.info(
                "No match (status %s)",
                response.status_code,
                extra={"lookup_event": "lookup.query.no_match", "disc_id": disc_id},
            )
        return matches

    def read(self, category: str, disc_id: str) -> list[str] | None:
        """Fetch the XMCD body lines of ``category``/``disc_id``.

        Returns:
            list[str] | None: Body lines on status ``210``, otherwise ``None``.

        Raises:
            CddbTransportError: On transport failure.
        """

        logger.info(
            "Reading %s/%s",
            category,
            disc_id,
            extra={"lookup_event": "lookup.read.start", "disc_id": disc_id},
        )
        response = self.send_command(build_read_command(category, disc_id))
        if not response.has_record:
            logger.info(
                "No record for %s/%s (status %s)",
                category,
                disc_id,
                response.status_code,
                extra={"lookup_event": "lookup.read.no_record", "disc_id": disc_id},
            )
            return None

        logger.info(
            "Read %d XMCD lines",
            len(response.body_lines),
            extra={"lookup_event": "lookup.read.success", "disc_id": disc_id},
        )
        return response.body_lines

    def read_record(self, category: str, disc_id: str) -> XmcdRecord | None:
        """Fetch and parse a record; ``None`` when the server has none."""

        lines = self.read(category, disc_id)
        if lines is None:
            return None
        return parse_xmcd_record(category, disc_id, lines)


__all__ = ["CddbClient", "parse_xmcd_record"]
