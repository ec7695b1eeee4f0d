"""Command line interface for cddbtool."""

import sys
from typing import final

from cddbtool.platform.logging import logger
from cddbtool.shared.errors import CddbError, CddbTransportError
from cddbtool.ui.cli.args import ArgumentParser
from cddbtool.ui.cli.args.options import (
    CLIArgs,
    DiscIdArgs,
    LookupArgs,
    QueryArgs,
    ReadArgs,
    SerializeArgs,
)
from cddbtool.ui.cli.commands import (
    CommandExecutor,
    DiscIdCommand,
    LookupCommand,
    QueryCommand,
    ReadCommand,
    SerializeCommand,
)
from cddbtool.ui.cli.commands.executor import EXIT_ERROR


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Map parsed arguments onto their command."""

        if isinstance(args, DiscIdArgs):
            return DiscIdCommand(args)
        if isinstance(args, QueryArgs):
            return QueryCommand(args)
        if isinstance(args, ReadArgs):
            return ReadCommand(args)
        if isinstance(args, LookupArgs):
            return LookupCommand(args)
        assert isinstance(args, SerializeArgs)
        return SerializeCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits with 0 on success, 1 on validation or transport errors, 2 when
        the server has no match or no record, and 130 on Ctrl-C.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor.build_command(args).execute()
            if exit_code:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except CddbTransportError as e:
            logger.error("CDDB server request failed: %s", str(e))
            sys.exit(EXIT_ERROR)
        except CddbError as e:
            logger.error("%s", str(e))
            sys.exit(EXIT_ERROR)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(EXIT_ERROR)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures and soft misses
        leave through ``sys.exit(...)`` instead.
    """
    CommandProcessor.process_command()
    return 0
