"""
Summary: Render an XmcdRecord back to XMCD text.
Why: Produce submission-ready records; the "." terminator is left to the transport.
"""

from __future__ import annotations

from cddbtool.features.disc.domain.toc import TableOfContents

from .models import XmcdRecord


def one_line(value: str | None) -> str:
    """Collapse ``value`` onto a single line."""

    return (value or "").replace("\r", "").replace("\n", " ")


def to_xmcd_lines(
    record: XmcdRecord,
    toc: TableOfContents | None = None,
    app_name: str | None = None,
    app_version: str | None = None,
) -> list[str]:
    """Return the XMCD lines for ``record`` without line terminators."""

    lines = ["# xmcd"]
    if toc is not None:
        lines.append("# Track frame offsets:")
        lines.extend(f"#\t{offset}" for offset in toc.track_offsets)
        lines.append(f"# Disc length: {toc.total_seconds} seconds")
    if app_name:
        suffix = f" {app_version}" if app_version else ""
        lines.append(f"# Submitted via: {app_name}{suffix}")

    for key, value in (
        ("DISCID", record.disc_id),
        ("DTITLE", record.d_title),
        ("DYEAR", record.d_year),
        ("DGENRE", record.d_genre),
    ):
        if value:
            lines.append(f"{key}={one_line(value)}")

    lines.extend(
        f"TTITLE{index}={one_line(title)}" for index, title in enumerate(record.track_titles)
    )

    raw = record.raw_fields
    if "EXTD" in raw:
        lines.append(f"EXTD={one_line(raw['EXTD'])}")
    lines.extend(
        f"{key}={one_line(value)}" for key, value in raw.items() if key.startswith("EXTT")
    )
    if "PLAYORDER" in raw:
        lines.append(f"PLAYORDER={one_line(raw['PLAYORDER'])}")

    return lines


def to_xmcd(
    record: XmcdRecord,
    toc: TableOfContents | None = None,
    app_name: str | None = None,
    app_version: str | None = None,
) -> str:
    """Return the XMCD text for ``record``, each line newline-terminated."""

    return "".join(f"{line}\n" for line in to_xmcd_lines(record, toc, app_name, app_version))


__all__ = ["one_line", "to_xmcd", "to_xmcd_lines"]
