"""Rich console handler with styling for lookup events."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class LookupRichHandler(RichHandler):
    """Rich handler that renders ``lookup_event`` records with icons.

    Records logged with ``extra={"lookup_event": ...}`` get a compact,
    coloured one-line rendering; everything else falls back to Rich.
    """

    _LOOKUP_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "lookup.query.start": ("🔎", "cyan"),
        "lookup.query.matches": ("💿", "green"),
        "lookup.query.no_match": ("ℹ️", "yellow"),
        "lookup.read.start": ("📥", "blue"),
        "lookup.read.success": ("✅", "green"),
        "lookup.read.no_record": ("⚠️", "yellow"),
        "lookup.export.saved": ("💾", "magenta"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_lookup_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured lookup events with dedicated styling."""

        event = getattr(record, "lookup_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._LOOKUP_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        disc_id = getattr(record, "disc_id", None)
        if isinstance(disc_id, str) and disc_id and disc_id not in message:
            _ = text.append(f" [{disc_id}]", style=Style(color="white"))
        return text

    def _render_level_prefix(self, record: logging.LogRecord, message: str) -> Text | None:
        """Prefix warnings and errors since the level column is hidden."""

        if record.levelno < logging.WARNING:
            return None
        color = "red" if record.levelno >= logging.ERROR else "yellow"
        text = Text()
        _ = text.append(f"{record.levelname}: ", style=Style(color=color, bold=True))
        _ = text.append(message)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        lookup_text = self._render_lookup_message(record, message)
        if lookup_text is not None:
            return lookup_text

        level_text = self._render_level_prefix(record, message)
        if level_text is not None:
            return level_text

        return super().render_message(record, message)


__all__ = ["LookupRichHandler"]
