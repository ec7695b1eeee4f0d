"""Tests for XMCD serialization."""

from __future__ import annotations

from cddbtool.features.disc import TableOfContents
from cddbtool.features.xmcd import XmcdRecord, one_line, parse_xmcd_record, to_xmcd, to_xmcd_lines


def test_serialize_full_record(xmcd_body: list[str], three_track_toc: TableOfContents) -> None:
    record = parse_xmcd_record("rock", "21088c03", xmcd_body)

    lines = to_xmcd_lines(record, three_track_toc, "cddbtool", "0.1.0")

    assert lines == [
        "# xmcd",
        "# Track frame offsets:",
        "#\t150",
        "#\t22343",
        "#\t46248",
        "# Disc length: 2188 seconds",
        "# Submitted via: cddbtool 0.1.0",
        "DISCID=21088c03",
        "DTITLE=Test Artist / Test Album",
        "DYEAR=1999",
        "DGENRE=Rock",
        "TTITLE0=First",
        "TTITLE1=Second",
        "TTITLE2=Third",
        "EXTD=Extended notes",
        "EXTT0=",
        "EXTT1=Live",
        "EXTT2=",
        "PLAYORDER=",
    ]


def test_empty_scalars_are_omitted_but_track_titles_are_not() -> None:
    record = XmcdRecord(track_titles=["", "Two"])

    assert to_xmcd_lines(record) == ["# xmcd", "TTITLE0=", "TTITLE1=Two"]


def test_submitted_via_without_version() -> None:
    lines = to_xmcd_lines(XmcdRecord(), app_name="tool")

    assert "# Submitted via: tool" in lines


def test_values_are_collapsed_to_one_line() -> None:
    record = XmcdRecord(d_title="Artist /\r\nAlbum", track_titles=["a\nb"])
    record.raw_fields["EXTD"] = "line1\r\nline2\nline3"

    text = to_xmcd(record)

    assert "DTITLE=Artist / Album\n" in text
    assert "TTITLE0=a b\n" in text
    assert "EXTD=line1 line2 line3\n" in text
    assert "\r" not in text


def test_to_xmcd_has_no_terminator() -> None:
    text = to_xmcd(XmcdRecord(d_title="A / B"))

    assert text.endswith("DTITLE=A / B\n")
    assert "\n.\n" not in text


def test_round_trip_preserves_modeled_fields() -> None:
    original = XmcdRecord(
        category="jazz",
        disc_id="abcd1234",
        d_title="Someone / Something",
        d_year="2001",
        d_genre="Jazz",
        track_titles=["Intro", "", "Outro"],
    )

    parsed = parse_xmcd_record("jazz", "abcd1234", to_xmcd_lines(original))

    assert parsed.d_title == original.d_title
    assert parsed.d_year == original.d_year
    assert parsed.d_genre == original.d_genre
    assert parsed.track_titles == original.track_titles


def test_one_line_handles_none() -> None:
    assert one_line(None) == ""
