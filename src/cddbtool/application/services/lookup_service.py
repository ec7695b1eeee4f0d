"""Application service running a full disc lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from logging import Logger, getLogger
from pathlib import Path
from typing import Protocol, final

from cddbtool.features.disc.domain.toc import TableOfContents
from cddbtool.features.xmcd.domain.models import CddbMatch, XmcdRecord
from cddbtool.features.xmcd.domain.parser import parse_xmcd_record
from cddbtool.features.xmcd.usecases.export import (
    DEFAULT_CDPLAYER_INI_ENCODING,
    export_cdplayer_ini,
    save_xmcd,
)


class LookupGateway(Protocol):
    """Subset of ``CddbClient`` the service depends on."""

    def query(self, toc: TableOfContents) -> list[CddbMatch]:
        ...

    def read(self, category: str, disc_id: str) -> list[str] | None:
        ...


class LookupOutcome(str, Enum):
    """Terminal state of a lookup."""

    FOUND = "found"
    NO_MATCH = "no_match"
    NO_RECORD = "no_record"


@dataclass(slots=True)
class LookupRequest:
    """Parameters describing one lookup run."""

    toc: TableOfContents
    match_index: int = 0
    xmcd_out_dir: Path | None = None
    output_encoding: str = "utf-8"
    cdplayer_ini_path: Path | None = None
    volume_serial: str | None = None
    cdplayer_ini_encoding: str | None = None
    track_title_overrides: list[str] | None = None


@dataclass(slots=True)
class LookupResult:
    """Everything a lookup produced."""

    outcome: LookupOutcome
    matches: list[CddbMatch] = field(default_factory=list)
    selected: CddbMatch | None = None
    lines: list[str] = field(default_factory=list)
    record: XmcdRecord | None = None
    exported: list[Path] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.outcome is LookupOutcome.FOUND


@final
class LookupService:
    """Query a disc, read the chosen match and run the requested exports."""

    def __init__(self, gateway: LookupGateway, *, logger: Logger | None = None) -> None:
        self._gateway = gateway
        self._logger = logger or getLogger(__name__)

    def run(self, request: LookupRequest) -> LookupResult:
        """Execute the lookup described by ``request``.

        Validation and transport errors propagate; "no match" and "no
        record" are reported through ``LookupResult.outcome``.
        """

        matches = self._gateway.query(request.toc)
        if not matches:
            return LookupResult(outcome=LookupOutcome.NO_MATCH)

        index = request.match_index if 0 <= request.match_index < len(matches) else 0
        if index != request.match_index:
            self._logger.warning(
                "Match index %d out of range; using the first match", request.match_index
            )
        selected = matches[index]

        lines = self._gateway.read(selected.category, selected.disc_id)
        if lines is None:
            return LookupResult(
                outcome=LookupOutcome.NO_RECORD, matches=matches, selected=selected
            )

        record = parse_xmcd_record(selected.category, selected.disc_id, lines)
        if request.track_title_overrides:
            for track_index, title in enumerate(request.track_title_overrides):
                if title:
                    record.set_track_title(track_index, title)

        result = LookupResult(
            outcome=LookupOutcome.FOUND,
            matches=matches,
            selected=selected,
            lines=lines,
            record=record,
        )
        self._export(request, result, record, lines)
        return result

    def _export(
        self,
        request: LookupRequest,
        result: LookupResult,
        record: XmcdRecord,
        lines: list[str],
    ) -> None:
        if request.xmcd_out_dir is not None:
            result.exported.append(
                save_xmcd(lines, record, request.xmcd_out_dir, request.output_encoding)
            )

        if request.cdplayer_ini_path is not None:
            if not request.volume_serial:
                self._logger.warning(
                    "Unable to determine volume serial number. Skipping cdplayer.ini export."
                )
                return
            result.exported.append(
                export_cdplayer_ini(
                    request.cdplayer_ini_path,
                    request.volume_serial,
                    record,
                    request.toc.track_count,
                    encoding=request.cdplayer_ini_encoding or DEFAULT_CDPLAYER_INI_ENCODING,
                )
            )


__all__ = [
    "LookupGateway",
    "LookupOutcome",
    "LookupRequest",
    "LookupResult",
    "LookupService",
]
