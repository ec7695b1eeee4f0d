"""Command execution package for CLI."""

from cddbtool.ui.cli.commands.executor import CommandExecutor
from cddbtool.ui.cli.commands.discid import DiscIdCommand
from cddbtool.ui.cli.commands.lookup import LookupCommand
from cddbtool.ui.cli.commands.query import QueryCommand
from cddbtool.ui.cli.commands.read import ReadCommand
from cddbtool.ui.cli.commands.serialize import SerializeCommand

__all__ = [
    "CommandExecutor",
    "DiscIdCommand",
    "LookupCommand",
    "QueryCommand",
    "ReadCommand",
    "SerializeCommand",
]
