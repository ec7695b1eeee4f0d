"""Query command implementation for the CLI."""

from __future__ import annotations

from typing import final

from cddbtool.ui.cli.args.options import QueryArgs
from cddbtool.ui.cli.commands.executor import EXIT_NOT_FOUND, EXIT_OK, CommandExecutor
from cddbtool.ui.cli.display import LookupDisplay


@final
class QueryCommand(CommandExecutor):
    """List the matches a server returns for a TOC."""

    def __init__(self, args: QueryArgs, display: LookupDisplay | None = None) -> None:
        super().__init__(display)
        self.args = args

    def execute(self) -> int:
        toc = self.load_toc(self.args.toc_path)
        client = self.build_client(self.args.server)
        matches = client.query(toc)
        self.display.show_matches(matches, quiet=self.args.quiet)
        return EXIT_OK if matches else EXIT_NOT_FOUND
