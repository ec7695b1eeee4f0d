"""
Summary: Parse CDDB server responses and derive query matches.
Why: Status handling decides between match, no-match and record outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from cddbtool.features.xmcd.domain.models import CddbMatch

STATUS_EXACT_MATCH: Final[int] = 200
STATUS_NO_MATCH: Final[int] = 202
# 210 also means "database entry follows" for a read command.
STATUS_MULTIPLE_MATCHES: Final[int] = 210
STATUS_INEXACT_MATCHES: Final[int] = 211

TERMINATOR: Final[str] = "."


def _parse_status_code(token: str) -> int:
    if "_" in token:
        return 0
    try:
        return int(token)
    except ValueError:
        return 0


def parse_match_line(line: str) -> CddbMatch | None:
    """Parse ``category discid title...``; ``None`` when fewer than 3 tokens."""

    parts = line.split(None, 2)
    if len(parts) < 3:
        return None
    category, disc_id, title = parts
    return CddbMatch(category=category, disc_id=disc_id, title=title.strip())


@dataclass(frozen=True, slots=True)
class CddbResponse:
    """Status line and body of one CDDB response."""

    status_code: int
    status_message: str
    body_lines: list[str] = field(default_factory=list)

    def single_match(self) -> list[CddbMatch]:
        """Matches for a ``200`` response."""

        if self.body_lines:
            candidate = parse_match_line(self.body_lines[0])
            if candidate is not None:
                return [candidate]

        if self.status_message:
            candidate = parse_match_line(self.status_message)
            if candidate is not None:
                return [candidate]

        return []

    def multiple_matches(self) -> list[CddbMatch]:
        """Matches for a ``210``/``211`` response, skipping malformed lines."""

        results: list[CddbMatch] = []
        for line in self.body_lines:
            candidate = parse_match_line(line)
            if candidate is not None:
                results.append(candidate)
        return results

    def matches(self) -> list[CddbMatch]:
        """Dispatch on the status code of a query response."""

        if self.status_code == STATUS_EXACT_MATCH:
            return self.single_match()
        if self.status_code in (STATUS_MULTIPLE_MATCHES, STATUS_INEXACT_MATCHES):
            return self.multiple_matches()
        return []

    @property
    def has_record(self) -> bool:
        """Whether a read response carries an XMCD body."""

        return self.status_code == STATUS_MULTIPLE_MATCHES


def parse_response(text: str | None) -> CddbResponse:
    """Parse decoded response ``text``. Never raises."""

    if not text:
        return CddbResponse(0, "", [])

    lines = [line.strip() for line in text.split("\n")]
    if len(lines) > 1 and lines[-1] == "":
        # artifact of the final newline, not a body line
        lines.pop()

    code_token, _, message = lines[0].partition(" ")
    status = _parse_status_code(code_token)
    if status == 0:
        message = ""

    body: list[str] = []
    for line in lines[1:]:
        if line == TERMINATOR:
            break
        body.append(line)

    return CddbResponse(status, message, body)


__all__ = [
    "CddbResponse",
    "STATUS_EXACT_MATCH",
    "STATUS_INEXACT_MATCHES",
    "STATUS_MULTIPLE_MATCHES",
    "STATUS_NO_MATCH",
    "TERMINATOR",
    "parse_match_line",
    "parse_response",
]
