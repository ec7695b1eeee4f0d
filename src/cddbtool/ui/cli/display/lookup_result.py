"""src/cddbtool/ui/cli/display/lookup_result.py
What: Render matches, XMCD records and disc ids on the console.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cddbtool.features.disc.domain.toc import TableOfContents
from cddbtool.features.xmcd.domain.disc_title import split_disc_title
from cddbtool.features.xmcd.domain.models import CddbMatch, XmcdRecord


@final
class LookupDisplay:
    """Handles lookup output in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_disc_id(self, disc_id: str, toc: TableOfContents, quiet: bool = False) -> None:
        """Print the disc id; quiet mode prints only the id."""

        if quiet:
            self.console.print(disc_id, markup=False, highlight=False)
            return

        self.console.print(f"[bold]Disc ID:[/bold] {disc_id}")
        self.console.print(f"Tracks: {toc.track_count}")
        self.console.print(f"Total seconds: {toc.total_seconds}")

    def show_matches(self, matches: Sequence[CddbMatch], quiet: bool = False) -> None:
        """Display query matches as a numbered table."""

        if quiet:
            return

        if not matches:
            self.console.print("[yellow]No match.[/yellow]")
            return

        table = Table(title="Matches", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Category", style="cyan")
        table.add_column("Disc ID", style="magenta")
        table.add_column("Title")
        for number, match in enumerate(matches, start=1):
            table.add_row(str(number), match.category, match.disc_id, Text(match.title))
        self.console.print(table)

    def show_no_record(self, match: CddbMatch | None, quiet: bool = False) -> None:
        if quiet:
            return
        label = f" for {match.category}/{match.disc_id}" if match else ""
        self.console.print(f"[yellow]Failed to read XMCD{label}.[/yellow]")

    def show_record(self, record: XmcdRecord, quiet: bool = False) -> None:
        """Display the modeled fields of an XMCD record.

        Args:
            record: Parsed record.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        artist, title = split_disc_title(record.d_title)
        self.console.print("\n[bold]=== XMCD ===[/bold]")
        self.console.print(Text(f"DTITLE: {record.d_title}"))
        self.console.print(Text(f"Artist: {artist}  Album: {title}", style="dim"))
        if record.d_year:
            self.console.print(Text(f"DYEAR: {record.d_year}"))
        if record.d_genre:
            self.console.print(Text(f"DGENRE: {record.d_genre}"))

        table = Table(show_header=True, box=None, pad_edge=False)
        table.add_column("Track", justify="right", style="cyan")
        table.add_column("Title")
        for index, track_title in enumerate(record.track_titles):
            table.add_row(f"TTITLE{index}", Text(track_title))
        self.console.print(table)

    def show_exports(self, paths: Sequence[Path], quiet: bool = False) -> None:
        if quiet or not paths:
            return
        for path in paths:
            self.console.print(Text(f"  • {path}", style="green"))
