"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ServerOptions:
    """Server and identity settings resolved from flags, config and defaults."""

    cgi_url: str
    user: str | None
    host: str | None
    app_name: str
    app_version: str
    proto_level: int
    encoding: str
    output_encoding: str


@final
@dataclass(slots=True)
class DiscIdArgs:
    """Command line arguments for the ``discid`` subcommand."""

    command: Literal["discid"]
    toc_path: Path | None
    quiet: bool


@final
@dataclass(slots=True)
class QueryArgs:
    """Command line arguments for the ``query`` subcommand."""

    command: Literal["query"]
    server: ServerOptions
    toc_path: Path | None
    quiet: bool


@final
@dataclass(slots=True)
class ReadArgs:
    """Command line arguments for the ``read`` subcommand."""

    command: Literal["read"]
    server: ServerOptions
    category: str
    disc_id: str
    xmcd_out_dir: Path | None
    quiet: bool


@final
@dataclass(slots=True)
class LookupArgs:
    """Command line arguments for the ``lookup`` subcommand."""

    command: Literal["lookup"]
    server: ServerOptions
    toc_path: Path | None
    match_index: int
    xmcd_out_dir: Path | None
    cdplayer_ini_path: Path | None
    volume_serial: str | None
    cdplayer_ini_encoding: str | None
    quiet: bool
    track_title_overrides: list[str] | None = None


@final
@dataclass(slots=True)
class SerializeArgs:
    """Command line arguments for the ``serialize`` subcommand."""

    command: Literal["serialize"]
    xmcd_path: Path
    toc_path: Path | None
    category: str
    disc_id: str | None
    input_encoding: str
    app_name: str | None
    app_version: str | None
    terminate: bool


CLIArgs = DiscIdArgs | QueryArgs | ReadArgs | LookupArgs | SerializeArgs

__all__ = [
    "CLIArgs",
    "DiscIdArgs",
    "LookupArgs",
    "QueryArgs",
    "ReadArgs",
    "SerializeArgs",
    "ServerOptions",
]
