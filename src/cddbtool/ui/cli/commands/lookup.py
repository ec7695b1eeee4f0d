"""Lookup command implementation for the CLI."""

from __future__ import annotations

from typing import final

from cddbtool.application.services.lookup_service import (
    LookupOutcome,
    LookupRequest,
    LookupResult,
    LookupService,
)
from cddbtool.ui.cli.args.options import LookupArgs
from cddbtool.ui.cli.commands.executor import EXIT_NOT_FOUND, EXIT_OK, CommandExecutor
from cddbtool.ui.cli.display import LookupDisplay


@final
class LookupCommand(CommandExecutor):
    """Query, read the chosen match, display it and run exports."""

    def __init__(self, args: LookupArgs, display: LookupDisplay | None = None) -> None:
        super().__init__(display)
        self.args = args

    def execute(self) -> int:
        toc = self.load_toc(self.args.toc_path)
        service = LookupService(self.build_client(self.args.server))
        request = LookupRequest(
            toc=toc,
            match_index=self.args.match_index,
            xmcd_out_dir=self.args.xmcd_out_dir,
            output_encoding=self.args.server.output_encoding,
            cdplayer_ini_path=self.args.cdplayer_ini_path,
            volume_serial=self.args.volume_serial,
            cdplayer_ini_encoding=self.args.cdplayer_ini_encoding,
            track_title_overrides=self.args.track_title_overrides,
        )
        result = service.run(request)
        return self._present(result)

    def _present(self, result: LookupResult) -> int:
        quiet = self.args.quiet
        self.display.show_matches(result.matches, quiet=quiet)
        if result.outcome is LookupOutcome.NO_MATCH:
            return EXIT_NOT_FOUND
        if result.outcome is LookupOutcome.NO_RECORD or result.record is None:
            self.display.show_no_record(result.selected, quiet=quiet)
            return EXIT_NOT_FOUND

        self.display.show_record(result.record, quiet=quiet)
        self.display.show_exports(result.exported, quiet=quiet)
        return EXIT_OK
