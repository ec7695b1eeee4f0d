"""
Summary: Build CDDB command strings, hello parameters and request URLs.
Why: Servers expect literal "+" separators, so the query string is assembled by hand.
"""

from __future__ import annotations

from urllib.parse import quote

from cddbtool.config.settings import DEFAULT_PROTO_LEVEL
from cddbtool.features.disc.domain.toc import TableOfContents


def build_hello_param(user: str, host: str, app_name: str, app_version: str) -> str:
    """Percent-encode each hello component and join them with ``+``."""

    return "+".join(quote(part, safe="") for part in (user, host, app_name, app_version))


def build_query_command(disc_id: str, toc: TableOfContents) -> str:
    """Return ``cddb+query+<id>+<n>+<offsets...>+<seconds>``."""

    parts = ["cddb", "query", disc_id, str(toc.track_count)]
    parts.extend(str(offset) for offset in toc.track_offsets)
    parts.append(str(toc.total_seconds))
    return "+".join(parts)


def build_read_command(category: str, disc_id: str) -> str:
    """Return ``cddb+read+<category>+<id>``."""

    return f"cddb+read+{category}+{disc_id}"


def build_request_url(
    cgi_base: str,
    command: str,
    hello_param: str,
    proto_level: int = DEFAULT_PROTO_LEVEL,
) -> str:
    """Return the full GET URL for ``command``."""

    return f"{cgi_base}?cmd={command}&hello={hello_param}&proto={proto_level}"


__all__ = [
    "build_hello_param",
    "build_query_command",
    "build_read_command",
    "build_request_url",
]
