"""Where: src/cddbtool/features/xmcd/domain/models.py
What: Query matches and XMCD records returned by CDDB servers.
Why: Share one representation between the client, exports and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CddbMatch:
    """One candidate returned by a ``cddb query`` command."""

    category: str
    disc_id: str
    title: str  # "Artist / Album", not split


@dataclass(slots=True)
class XmcdRecord:
    """Parsed XMCD database entry.

    ``raw_fields`` keeps every ``KEY=value`` pair in first-seen key order; a
    repeated key overwrites the value in place.
    """

    category: str = ""
    disc_id: str = ""
    d_title: str = ""
    d_year: str = ""
    d_genre: str = ""
    track_titles: list[str] = field(default_factory=list)
    raw_fields: dict[str, str] = field(default_factory=dict)

    def set_track_title(self, index: int, title: str) -> None:
        """Assign ``title`` to track ``index``, padding skipped tracks with ``""``."""

        if index < 0:
            raise IndexError(f"Track index must be non-negative, got {index}")
        while len(self.track_titles) <= index:
            self.track_titles.append("")
        self.track_titles[index] = title


__all__ = ["CddbMatch", "XmcdRecord"]
