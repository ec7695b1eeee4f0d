"""Tests for the TableOfContents value."""

from __future__ import annotations

import dataclasses

import pytest

from cddbtool.features.disc import TableOfContents
from cddbtool.shared.errors import InvalidTocError


def test_total_seconds_rounds_up(three_track_toc: TableOfContents) -> None:
    """164050 frames is 2187.33 seconds, reported as 2188."""

    assert three_track_toc.total_seconds == 2188
    assert three_track_toc.track_count == 3


def test_total_seconds_exact_multiple() -> None:
    toc = TableOfContents.from_offsets([150], 150 + 75 * 60)

    assert toc.total_seconds == 60


@pytest.mark.parametrize(
    ("offsets", "leadout"),
    [
        ([], 1000),
        ([150], 150),
        ([500], 100),
    ],
)
def test_total_seconds_is_zero_for_degenerate_toc(offsets: list[int], leadout: int) -> None:
    assert TableOfContents.from_offsets(offsets, leadout).total_seconds == 0


def test_offsets_are_stored_as_tuple() -> None:
    toc = TableOfContents.from_offsets([150, 2000], 5000)

    assert toc.track_offsets == (150, 2000)


def test_toc_is_immutable(three_track_toc: TableOfContents) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        three_track_toc.leadout_offset = 1  # type: ignore[misc]


def test_negative_offsets_are_rejected() -> None:
    with pytest.raises(InvalidTocError):
        _ = TableOfContents.from_offsets([150, -1], 5000)

    with pytest.raises(InvalidTocError):
        _ = TableOfContents.from_offsets([150], -5)
