"""Shared pytest fixtures for cddbtool tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from cddbtool.features.disc import TableOfContents


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config discovery at a temporary file and reset the singleton."""

    from cddbtool.config.config import Config

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("CDDBTOOL_CONFIG_PATH", str(config_path))
    Config.reset()
    try:
        yield config_path
    finally:
        Config.reset()


@pytest.fixture
def three_track_toc() -> TableOfContents:
    """TOC with offsets 150/22343/46248 and leadout 164200."""

    return TableOfContents.from_offsets([150, 22343, 46248], 164200)


@pytest.fixture
def xmcd_body() -> list[str]:
    """Body lines of a typical read response."""

    return [
        "# xmcd",
        "#",
        "# Track frame offsets:",
        "#\t150",
        "#\t22343",
        "#\t46248",
        "#",
        "# Disc length: 2188 seconds",
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
