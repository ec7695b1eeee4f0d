"""
Summary: Parse XMCD body lines into an XmcdRecord.
Why: Turn read-command output into typed fields without touching the network.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .models import XmcdRecord

_TRACK_TITLE_PREFIX: Final[str] = "TTITLE"
# Red Book audio CDs carry at most 99 tracks.
MAX_TRACKS: Final[int] = 99


def _track_index(key: str) -> int | None:
    suffix = key[len(_TRACK_TITLE_PREFIX):]
    if not suffix.isascii() or not suffix.isdigit():
        return None
    index = int(suffix)
    return index if index < MAX_TRACKS else None


def parse_xmcd_record(category: str, disc_id: str, lines: Iterable[str]) -> XmcdRecord:
    """Parse XMCD ``lines`` into a record.

    Blank lines, ``#`` comments, lines without ``=`` and lines with an empty
    key are skipped. Scalars use last-write-wins; continuation lines are not
    merged. ``TTITLE<n>`` keys beyond the 99-track limit stay in
    ``raw_fields`` only.
    """

    record = XmcdRecord(category=category, disc_id=disc_id)
    for line in lines:
        if not line.strip() or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        if not sep or not key:
            continue

        record.raw_fields[key] = value

        if key == "DTITLE":
            record.d_title = value
        elif key == "DYEAR":
            record.d_year = value
        elif key == "DGENRE":
            record.d_genre = value
        elif key.startswith(_TRACK_TITLE_PREFIX):
            index = _track_index(key)
            if index is not None:
                record.set_track_title(index, value)

    return record


__all__ = ["MAX_TRACKS", "parse_xmcd_record"]
