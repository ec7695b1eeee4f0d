"""
Summary: FreeDB/CDDB disc identifier computation.
Why: The id must match what real CDDB servers compute for the same TOC.
"""

from __future__ import annotations

from cddbtool.shared.errors import InvalidTocError

from .toc import FRAMES_PER_SECOND, TableOfContents


def digit_sum(value: int) -> int:
    """Return the sum of the decimal digits of a non-negative integer."""

    total = 0
    while value > 0:
        total += value % 10
        value //= 10
    return total


def compute_disc_id(toc: TableOfContents) -> str:
    """Compute the 8-hex-digit CDDB disc id for ``toc``.

    Args:
        toc: Table of contents with at least one track.

    Returns:
        str: Lowercase, zero-padded hexadecimal disc id.

    Raises:
        InvalidTocError: If the TOC holds no tracks.
    """

    if toc.track_count == 0:
        raise InvalidTocError("TOC is empty.")

    checksum = sum(digit_sum(offset // FRAMES_PER_SECOND) for offset in toc.track_offsets)
    disc_id = ((checksum % 255) << 24) | (toc.total_seconds << 8) | toc.track_count
    return f"{disc_id & 0xFFFFFFFF:08x}"


__all__ = ["compute_disc_id", "digit_sum"]
