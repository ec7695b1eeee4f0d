"""Serialize command implementation for the CLI."""

from __future__ import annotations

import sys
from typing import TextIO, final

from cddbtool.features.disc import compute_disc_id, load_toc_json
from cddbtool.features.xmcd.domain.parser import parse_xmcd_record
from cddbtool.features.xmcd.domain.serializer import to_xmcd
from cddbtool.platform.cddb.encoding import resolve_encoding
from cddbtool.platform.cddb.response import TERMINATOR
from cddbtool.ui.cli.args.options import SerializeArgs
from cddbtool.ui.cli.commands.executor import EXIT_OK, CommandExecutor


@final
class SerializeCommand(CommandExecutor):
    """Parse a stored XMCD file and write it back out in canonical order."""

    def __init__(self, args: SerializeArgs, stream: TextIO | None = None) -> None:
        super().__init__()
        self.args = args
        self.stream = stream or sys.stdout

    def execute(self) -> int:
        encoding = resolve_encoding(self.args.input_encoding).name
        lines = self.args.xmcd_path.read_text(encoding=encoding, errors="replace").splitlines()

        toc = load_toc_json(self.args.toc_path) if self.args.toc_path is not None else None
        record = parse_xmcd_record(self.args.category, "", lines)
        record.disc_id = (
            self.args.disc_id
            or (compute_disc_id(toc) if toc is not None else "")
            or record.raw_fields.get("DISCID", "")
        )

        text = to_xmcd(record, toc, self.args.app_name, self.args.app_version)
        if self.args.terminate:
            text += f"{TERMINATOR}\n"
        _ = self.stream.write(text)
        return EXIT_OK
