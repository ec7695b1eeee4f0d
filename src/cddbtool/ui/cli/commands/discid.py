"""Disc id command implementation for the CLI."""

from __future__ import annotations

from typing import final

from cddbtool.features.disc import compute_disc_id
from cddbtool.ui.cli.args.options import DiscIdArgs
from cddbtool.ui.cli.commands.executor import EXIT_OK, CommandExecutor
from cddbtool.ui.cli.display import LookupDisplay


@final
class DiscIdCommand(CommandExecutor):
    """Print the CDDB disc id of a TOC without any network access."""

    def __init__(self, args: DiscIdArgs, display: LookupDisplay | None = None) -> None:
        super().__init__(display)
        self.args = args

    def execute(self) -> int:
        toc = self.load_toc(self.args.toc_path)
        self.display.show_disc_id(compute_disc_id(toc), toc, quiet=self.args.quiet)
        return EXIT_OK
