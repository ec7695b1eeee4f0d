"""Read command implementation for the CLI."""

from __future__ import annotations

from typing import final

from cddbtool.features.xmcd.domain.models import CddbMatch
from cddbtool.features.xmcd.domain.parser import parse_xmcd_record
from cddbtool.features.xmcd.usecases.export import save_xmcd
from cddbtool.ui.cli.args.options import ReadArgs
from cddbtool.ui.cli.commands.executor import EXIT_NOT_FOUND, EXIT_OK, CommandExecutor
from cddbtool.ui.cli.display import LookupDisplay


@final
class ReadCommand(CommandExecutor):
    """Fetch one record by category and disc id."""

    def __init__(self, args: ReadArgs, display: LookupDisplay | None = None) -> None:
        super().__init__(display)
        self.args = args

    def execute(self) -> int:
        client = self.build_client(self.args.server)
        lines = client.read(self.args.category, self.args.disc_id)
        if lines is None:
            self.display.show_no_record(
                CddbMatch(self.args.category, self.args.disc_id, ""), quiet=self.args.quiet
            )
            return EXIT_NOT_FOUND

        record = parse_xmcd_record(self.args.category, self.args.disc_id, lines)
        self.display.show_record(record, quiet=self.args.quiet)

        if self.args.xmcd_out_dir is not None:
            saved = save_xmcd(
                lines, record, self.args.xmcd_out_dir, self.args.server.output_encoding
            )
            self.display.show_exports([saved], quiet=self.args.quiet)
        return EXIT_OK
