"""Utility helpers for text file persistence."""

from __future__ import annotations

from pathlib import Path


def write_text_file(
    path: Path,
    content: str,
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> None:
    """Persist textual content ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=encoding, errors=errors, newline="") as handle:
        _ = handle.write(content)


__all__ = ["write_text_file"]
