"""Command line argument handling package."""

from cddbtool.ui.cli.args.parser import ArgumentParser
from cddbtool.ui.cli.args.options import (
    CLIArgs,
    DiscIdArgs,
    LookupArgs,
    QueryArgs,
    ReadArgs,
    SerializeArgs,
    ServerOptions,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "DiscIdArgs",
    "LookupArgs",
    "QueryArgs",
    "ReadArgs",
    "SerializeArgs",
    "ServerOptions",
]
