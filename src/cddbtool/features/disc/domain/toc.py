"""
Summary: Immutable table-of-contents value describing a disc's track layout.
Why: Give the disc-id math and command builder one validated input shape.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from cddbtool.shared.errors import InvalidTocError

FRAMES_PER_SECOND: Final[int] = 75


@dataclass(frozen=True, slots=True)
class TableOfContents:
    """Track frame offsets and leadout offset of a compact disc.

    Attributes:
        track_offsets: Frame offset of each track, track 1 first.
        leadout_offset: Frame offset of the lead-out area.
    """

    track_offsets: tuple[int, ...]
    leadout_offset: int

    def __post_init__(self) -> None:
        offsets = tuple(int(offset) for offset in self.track_offsets)
        if any(offset < 0 for offset in offsets):
            raise InvalidTocError("Track offsets must be non-negative")
        if self.leadout_offset < 0:
            raise InvalidTocError("Leadout offset must be non-negative")
        object.__setattr__(self, "track_offsets", offsets)

    @classmethod
    def from_offsets(cls, track_offsets: Iterable[int], leadout_offset: int) -> TableOfContents:
        """Build a TOC from any iterable of offsets."""

        return cls(track_offsets=tuple(track_offsets), leadout_offset=int(leadout_offset))

    @property
    def track_count(self) -> int:
        return len(self.track_offsets)

    @property
    def total_seconds(self) -> int:
        """Playback length in whole seconds, rounded up.

        Returns ``0`` for an empty TOC or when the leadout does not follow the
        first track.
        """

        if not self.track_offsets:
            return 0
        total_frames = self.leadout_offset - self.track_offsets[0]
        if total_frames <= 0:
            return 0
        return (total_frames + FRAMES_PER_SECOND - 1) // FRAMES_PER_SECOND


__all__ = ["FRAMES_PER_SECOND", "TableOfContents"]
