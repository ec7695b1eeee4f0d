"""Where: src/cddbtool/platform/cddb/encoding.py
What: Resolve text encoding names with an explicit UTF-8 fallback.
Why: Unknown names must never fail client construction, yet tests need to see the fallback.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from cddbtool.config.settings import FALLBACK_ENCODING


@dataclass(frozen=True, slots=True)
class EncodingResolution:
    """Outcome of resolving an encoding name."""

    name: str
    requested: str
    fell_back: bool


def resolve_encoding(name: str | None) -> EncodingResolution:
    """Return the codec name for ``name`` or UTF-8 when it is unknown.

    Codecs that are not text encodings (``base64``, ``rot13``, ``zlib``...)
    count as unknown.
    """

    requested = (name or "").strip()
    if requested:
        try:
            info = codecs.lookup(requested)
            _ = b"".decode(info.name)
        except LookupError:
            pass
        else:
            return EncodingResolution(name=info.name, requested=requested, fell_back=False)
    return EncodingResolution(name=FALLBACK_ENCODING, requested=requested, fell_back=True)


__all__ = ["EncodingResolution", "resolve_encoding"]
