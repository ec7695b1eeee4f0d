"""src/cddbtool/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse client construction, TOC loading and display helpers across commands.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Final

from cddbtool.features.disc import SAMPLE_TOC, TableOfContents, load_toc_json
from cddbtool.platform.cddb.client import CddbClient
from cddbtool.platform.logging import logger
from cddbtool.ui.cli.args.options import ServerOptions
from cddbtool.ui.cli.display import LookupDisplay

EXIT_OK: Final[int] = 0
EXIT_ERROR: Final[int] = 1
# Expected protocol outcome: no match or no record.
EXIT_NOT_FOUND: Final[int] = 2


class CommandExecutor(ABC):
    """Base class for command execution."""

    display: LookupDisplay

    def __init__(self, display: LookupDisplay | None = None) -> None:
        self.display = display or LookupDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass

    @staticmethod
    def build_client(server: ServerOptions) -> CddbClient:
        """Create a client for ``server``; raises on a blank identity."""

        return CddbClient(
            server.cgi_url,
            server.user,
            server.host,
            app_name=server.app_name,
            app_version=server.app_version,
            proto_level=server.proto_level,
            encoding=server.encoding,
        )

    @staticmethod
    def load_toc(toc_path: Path | None) -> TableOfContents:
        """Load the TOC JSON file, or the built-in sample when none is given."""

        if toc_path is None:
            logger.warning("--toc not specified. Using sample values.")
            return SAMPLE_TOC
        return load_toc_json(toc_path)
