"""Where: src/cddbtool/features/xmcd/usecases/export.py
What: Write fetched records to disk as XMCD files or cdplayer.ini entries.
Why: Keep file naming, encoding and layout rules out of the CLI layer.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from cddbtool.config.file_ops import write_text_file
from cddbtool.platform.cddb.encoding import resolve_encoding
from cddbtool.platform.logging import logger
from cddbtool.shared.errors import ExportError

from ..domain.disc_title import sanitize_metadata, split_disc_title
from ..domain.models import XmcdRecord

DEFAULT_CDPLAYER_INI_ENCODING: Final[str] = "cp932"

_INVALID_FILE_NAME_CHARS: Final[re.Pattern[str]] = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_file_name_component(value: str | None) -> str:
    """Make ``value`` safe to use as part of a file name."""

    text = value.strip() if value and value.strip() else "Unknown"
    sanitized = _INVALID_FILE_NAME_CHARS.sub("_", text).strip()
    return sanitized or "Unknown"


def xmcd_file_name(record: XmcdRecord) -> str:
    """Return ``<artist> - <title>.xmcd`` for ``record``."""

    artist, title = split_disc_title(record.d_title)
    return f"{sanitize_file_name_component(artist)} - {sanitize_file_name_component(title)}.xmcd"


def save_xmcd(
    lines: Sequence[str],
    record: XmcdRecord,
    directory: Path | str,
    encoding: str = "utf-8",
) -> Path:
    """Save raw XMCD ``lines`` under ``directory``.

    Args:
        lines: Body lines as returned by the read command.
        record: Parsed record used to derive the file name.
        directory: Target directory, created when missing.
        encoding: Output encoding; unknown names fall back to UTF-8.

    Returns:
        Path: The written file.
    """

    resolution = resolve_encoding(encoding)
    destination = Path(directory).expanduser().resolve() / xmcd_file_name(record)
    content = "".join(f"{line}\n" for line in lines)
    try:
        write_text_file(destination, content, encoding=resolution.name, errors="replace")
    except OSError as exc:
        raise ExportError(f"Failed to write XMCD file {destination}: {exc}") from exc

    logger.info(
        "Saved XMCD: %s (%s)",
        destination,
        resolution.name,
        extra={"lookup_event": "lookup.export.saved", "export_path": str(destination)},
    )
    return destination


def _track_titles_for_ini(source: Sequence[str], track_count: int) -> list[str]:
    titles: list[str] = []
    for index in range(track_count):
        candidate = sanitize_metadata(source[index]) if index < len(source) else ""
        titles.append(candidate or f"Track{index + 1:02d}")
    return titles


def render_cdplayer_ini(
    volume_serial: str,
    record: XmcdRecord,
    track_count: int,
    track_titles: Sequence[str] | None = None,
) -> str:
    """Render a ``cdplayer.ini`` section for ``record``.

    Raises:
        ExportError: If the serial is blank or no track count can be derived.
    """

    if not volume_serial or not volume_serial.strip():
        raise ExportError("Volume serial number is required.")

    titles_source = list(track_titles) if track_titles is not None else record.track_titles
    if track_count <= 0:
        track_count = len(titles_source)
    if track_count <= 0:
        raise ExportError("Track count must be greater than zero.")

    artist, title = split_disc_title(record.d_title)
    lines = [
        f"[{volume_serial.strip()}]",
        f"artist={artist}",
        f"title={title}",
        f"numtracks={track_count}",
    ]
    lines.extend(
        f"{index}={name}"
        for index, name in enumerate(_track_titles_for_ini(titles_source, track_count))
    )
    return "".join(f"{line}\n" for line in lines)


def export_cdplayer_ini(
    path: Path | str,
    volume_serial: str,
    record: XmcdRecord,
    track_count: int,
    track_titles: Sequence[str] | None = None,
    encoding: str = DEFAULT_CDPLAYER_INI_ENCODING,
) -> Path:
    """Write a ``cdplayer.ini`` entry to ``path`` and return the resolved path."""

    content = render_cdplayer_ini(volume_serial, record, track_count, track_titles)
    resolution = resolve_encoding(encoding)
    destination = Path(path).expanduser().resolve()
    try:
        write_text_file(destination, content, encoding=resolution.name, errors="replace")
    except OSError as exc:
        raise ExportError(f"Failed to export cdplayer.ini to {destination}: {exc}") from exc

    logger.info(
        "Exported cdplayer.ini entry: %s",
        destination,
        extra={"lookup_event": "lookup.export.saved", "export_path": str(destination)},
    )
    return destination


__all__ = [
    "DEFAULT_CDPLAYER_INI_ENCODING",
    "export_cdplayer_ini",
    "render_cdplayer_ini",
    "sanitize_file_name_component",
    "save_xmcd",
    "xmcd_file_name",
]
