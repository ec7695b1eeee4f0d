"""Display package for CLI."""

from cddbtool.ui.cli.display.lookup_result import LookupDisplay

__all__ = ["LookupDisplay"]
