"""Where: src/cddbtool/features/disc/usecases/toc_loader.py
What: Load table-of-contents data from the JSON interchange format.
Why: Decouple lookups from OS-specific disc readers.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from cddbtool.shared.errors import InvalidTocError

from ..domain.toc import TableOfContents

_OFFSET_KEYS: Final[tuple[str, ...]] = ("trackoffsetsframes", "track_offsets", "trackoffsets")
_LEADOUT_KEYS: Final[tuple[str, ...]] = ("leadoutoffsetframes", "leadout_offset", "leadoutoffset")

SAMPLE_TOC: Final[TableOfContents] = TableOfContents(
    track_offsets=(150, 15000, 30000, 45000, 60000, 75000, 90000, 105000, 120000, 135000),
    leadout_offset=180000,
)


def _lookup(mapping: Mapping[str, Any], candidates: tuple[str, ...]) -> Any:
    lowered = {str(key).lower(): value for key, value in mapping.items()}
    for candidate in candidates:
        if candidate in lowered:
            return lowered[candidate]
    return None


def _as_frame_count(value: Any, label: str) -> int:
    # bool is an int subclass but never a valid frame count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTocError(f"{label} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidTocError(f"{label} must be non-negative, got {value}")
    return value


def toc_from_mapping(mapping: Mapping[str, Any]) -> TableOfContents:
    """Build a TOC from a decoded JSON object.

    Keys are matched case-insensitively; ``trackOffsetsFrames`` and
    ``leadoutOffsetFrames`` are the canonical names.

    Raises:
        InvalidTocError: If offsets are missing, empty or not integers.
    """

    raw_offsets = _lookup(mapping, _OFFSET_KEYS)
    if not isinstance(raw_offsets, list) or not raw_offsets:
        raise InvalidTocError("Invalid TOC JSON: trackOffsetsFrames must be a non-empty list")

    offsets = [_as_frame_count(value, "Track offset") for value in raw_offsets]
    leadout = _as_frame_count(_lookup(mapping, _LEADOUT_KEYS) or 0, "Leadout offset")
    return TableOfContents.from_offsets(offsets, leadout)


def load_toc_json(path: Path | str) -> TableOfContents:
    """Read a TOC JSON file from ``path``."""

    toc_path = Path(path)
    try:
        payload = json.loads(toc_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidTocError(f"Failed to read TOC JSON {toc_path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise InvalidTocError("Invalid TOC JSON: expected an object")
    return toc_from_mapping(payload)


__all__ = ["SAMPLE_TOC", "load_toc_json", "toc_from_mapping"]
