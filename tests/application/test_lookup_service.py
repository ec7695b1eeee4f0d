"""Tests for the lookup application service."""

from __future__ import annotations

from pathlib import Path

import pytest

from cddbtool.application.services import LookupOutcome, LookupRequest, LookupService
from cddbtool.features.disc import TableOfContents
from cddbtool.features.xmcd import CddbMatch
from cddbtool.shared.errors import CddbTransportError


class _Gateway:
    def __init__(
        self,
        matches: list[CddbMatch],
        records: dict[tuple[str, str], list[str]] | None = None,
    ) -> None:
        self.matches = matches
        self.records = records or {}
        self.reads: list[tuple[str, str]] = []

    def query(self, toc: TableOfContents) -> list[CddbMatch]:
        return self.matches

    def read(self, category: str, disc_id: str) -> list[str] | None:
        self.reads.append((category, disc_id))
        return self.records.get((category, disc_id))


class _BrokenGateway:
    def query(self, toc: TableOfContents) -> list[CddbMatch]:
        raise CddbTransportError("down", url="http://example.org")

    def read(self, category: str, disc_id: str) -> list[str] | None:
        raise AssertionError("read must not be called")


MATCHES = [
    CddbMatch("rock", "21088c03", "Artist / Album"),
    CddbMatch("misc", "21088c03", "Artist / Album (alt)"),
]


def test_no_match(three_track_toc: TableOfContents) -> None:
    gateway = _Gateway([])

    result = LookupService(gateway).run(LookupRequest(toc=three_track_toc))

    assert result.outcome is LookupOutcome.NO_MATCH
    assert not result.found
    assert gateway.reads == []


def test_no_record(three_track_toc: TableOfContents) -> None:
    result = LookupService(_Gateway(MATCHES)).run(LookupRequest(toc=three_track_toc))

    assert result.outcome is LookupOutcome.NO_RECORD
    assert result.selected == MATCHES[0]
    assert result.record is None


def test_found_reads_selected_match(three_track_toc: TableOfContents) -> None:
    gateway = _Gateway(MATCHES, {("misc", "21088c03"): ["DTITLE=Alt / Take", "TTITLE0=One"]})

    result = LookupService(gateway).run(LookupRequest(toc=three_track_toc, match_index=1))

    assert result.found
    assert gateway.reads == [("misc", "21088c03")]
    assert result.record is not None
    assert result.record.d_title == "Alt / Take"
    assert result.lines == ["DTITLE=Alt / Take", "TTITLE0=One"]


def test_out_of_range_match_index_uses_first(three_track_toc: TableOfContents) -> None:
    gateway = _Gateway(MATCHES, {("rock", "21088c03"): ["DTITLE=A / B"]})

    result = LookupService(gateway).run(LookupRequest(toc=three_track_toc, match_index=7))

    assert result.selected == MATCHES[0]
    assert result.found


def test_track_title_overrides(three_track_toc: TableOfContents) -> None:
    gateway = _Gateway(MATCHES, {("rock", "21088c03"): ["TTITLE0=Server", "TTITLE1=Kept"]})

    result = LookupService(gateway).run(
        LookupRequest(toc=three_track_toc, track_title_overrides=["Mine", "", "Third"])
    )

    assert result.record is not None
    assert result.record.track_titles == ["Mine", "Kept", "Third"]


def test_exports(three_track_toc: TableOfContents, tmp_path: Path) -> None:
    gateway = _Gateway(MATCHES, {("rock", "21088c03"): ["DTITLE=A / B", "TTITLE0=x"]})
    request = LookupRequest(
        toc=three_track_toc,
        xmcd_out_dir=tmp_path / "xmcd",
        cdplayer_ini_path=tmp_path / "cdplayer.ini",
        volume_serial="1234ABCD",
    )

    result = LookupService(gateway).run(request)

    assert [path.name for path in result.exported] == ["A - B.xmcd", "cdplayer.ini"]
    ini = (tmp_path / "cdplayer.ini").read_text(encoding="cp932").splitlines()
    assert ini[:4] == ["[1234ABCD]", "artist=A", "title=B", "numtracks=3"]
    assert ini[4:] == ["0=x", "1=Track02", "2=Track03"]


def test_cdplayer_ini_skipped_without_serial(three_track_toc: TableOfContents, tmp_path: Path) -> None:
    gateway = _Gateway(MATCHES, {("rock", "21088c03"): ["DTITLE=A / B"]})
    request = LookupRequest(toc=three_track_toc, cdplayer_ini_path=tmp_path / "cdplayer.ini")

    result = LookupService(gateway).run(request)

    assert result.exported == []
    assert not (tmp_path / "cdplayer.ini").exists()


def test_transport_errors_propagate(three_track_toc: TableOfContents) -> None:
    with pytest.raises(CddbTransportError):
        _ = LookupService(_BrokenGateway()).run(LookupRequest(toc=three_track_toc))
