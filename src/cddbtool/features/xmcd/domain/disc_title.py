"""Helpers for the ``Artist / Album`` convention of DTITLE values."""

from __future__ import annotations

from typing import Final

UNKNOWN_ARTIST: Final[str] = "Unknown Artist"
UNKNOWN_TITLE: Final[str] = "Unknown Title"


def sanitize_metadata(value: str | None) -> str:
    """Replace line breaks with spaces and trim."""

    if not value:
        return ""
    return value.replace("\r", " ").replace("\n", " ").strip()


def split_disc_title(d_title: str | None) -> tuple[str, str]:
    """Split a DTITLE value into ``(artist, title)`` with placeholders."""

    sanitized = sanitize_metadata(d_title)
    if not sanitized:
        return UNKNOWN_ARTIST, UNKNOWN_TITLE

    artist, sep, title = sanitized.partition("/")
    if not sep:
        return sanitized, UNKNOWN_TITLE

    return artist.strip() or UNKNOWN_ARTIST, title.strip() or UNKNOWN_TITLE


__all__ = ["UNKNOWN_ARTIST", "UNKNOWN_TITLE", "sanitize_metadata", "split_disc_title"]
