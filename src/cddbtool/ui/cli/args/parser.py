"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from cddbtool.config.config import Config
from cddbtool.config.settings import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_CGI_URL,
    DEFAULT_PROTO_LEVEL,
    DEFAULT_RESPONSE_ENCODING,
)
from cddbtool.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from cddbtool.ui.cli.args.options import (
    CLIArgs,
    DiscIdArgs,
    LookupArgs,
    QueryArgs,
    ReadArgs,
    SerializeArgs,
    ServerOptions,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="cddbtool",
            description="cddbtool - Look up compact discs on FreeDB/CDDB servers.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        discid_parser = subparsers.add_parser(
            "discid",
            help="Compute the CDDB disc id of a table of contents",
        )
        ArgumentParser._add_toc_argument(discid_parser)
        ArgumentParser._add_verbosity_arguments(discid_parser)

        query_parser = subparsers.add_parser(
            "query",
            help="List the server's matches for a table of contents",
        )
        ArgumentParser._add_server_arguments(query_parser)
        ArgumentParser._add_toc_argument(query_parser)
        ArgumentParser._add_verbosity_arguments(query_parser)

        read_parser = subparsers.add_parser(
            "read",
            help="Fetch one XMCD record by category and disc id",
        )
        _ = read_parser.add_argument("category", type=str, metavar="CATEGORY")
        _ = read_parser.add_argument("disc_id", type=str, metavar="DISCID")
        ArgumentParser._add_server_arguments(read_parser)
        ArgumentParser._add_xmcd_out_argument(read_parser)
        ArgumentParser._add_verbosity_arguments(read_parser)

        lookup_parser = subparsers.add_parser(
            "lookup",
            help="Query a disc, read the chosen match and optionally export it",
        )
        ArgumentParser._add_server_arguments(lookup_parser)
        ArgumentParser._add_toc_argument(lookup_parser)
        ArgumentParser._add_xmcd_out_argument(lookup_parser)
        _ = lookup_parser.add_argument(
            "--match",
            type=int,
            default=1,
            metavar="N",
            help="Which match to read, 1-based (default: 1)",
        )
        _ = lookup_parser.add_argument(
            "--cdplayer-ini",
            type=str,
            metavar="PATH",
            help="Write a cdplayer.ini entry to PATH",
        )
        _ = lookup_parser.add_argument(
            "--volume-serial",
            type=str,
            metavar="SERIAL",
            help="Volume serial number used as the cdplayer.ini section name",
        )
        _ = lookup_parser.add_argument(
            "--ini-encoding",
            type=str,
            metavar="NAME",
            help="Encoding of the cdplayer.ini entry (default: cp932)",
        )
        _ = lookup_parser.add_argument(
            "--track-title",
            action="append",
            dest="track_titles",
            metavar="TITLE",
            help="Override track titles in order; repeat per track, pass \"\" to keep the server title",
        )
        ArgumentParser._add_verbosity_arguments(lookup_parser)

        serialize_parser = subparsers.add_parser(
            "serialize",
            help="Re-serialize a stored XMCD file to standard output",
        )
        _ = serialize_parser.add_argument("xmcd_path", type=str, metavar="XMCD_FILE")
        ArgumentParser._add_toc_argument(serialize_parser)
        _ = serialize_parser.add_argument(
            "--category",
            type=str,
            default="misc",
            help="Category recorded on the parsed record (default: misc)",
        )
        _ = serialize_parser.add_argument(
            "--discid",
            type=str,
            dest="disc_id",
            help="Disc id to emit (default: computed from --toc, else DISCID in the file)",
        )
        _ = serialize_parser.add_argument(
            "--input-encoding",
            type=str,
            default="utf-8",
            metavar="NAME",
            help="Encoding of XMCD_FILE (default: utf-8)",
        )
        _ = serialize_parser.add_argument(
            "--submitted-via",
            action="store_true",
            help="Add a '# Submitted via' comment naming this client",
        )
        _ = serialize_parser.add_argument(
            "--terminate",
            action="store_true",
            help="Append the '.' terminator line expected by servers",
        )
        ArgumentParser._add_verbosity_arguments(serialize_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required values are missing or invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "discid":
            return DiscIdArgs(
                command="discid",
                toc_path=ArgumentParser._optional_path(parsed_args.toc),
                quiet=is_quiet,
            )

        if command == "serialize":
            return ArgumentParser._process_serialize(parsed_args)

        server = ArgumentParser._resolve_server(parsed_args, configuration)

        if command == "query":
            return QueryArgs(
                command="query",
                server=server,
                toc_path=ArgumentParser._optional_path(parsed_args.toc),
                quiet=is_quiet,
            )

        if command == "read":
            return ReadArgs(
                command="read",
                server=server,
                category=parsed_args.category,
                disc_id=parsed_args.disc_id,
                xmcd_out_dir=ArgumentParser._xmcd_out_dir(parsed_args, configuration),
                quiet=is_quiet,
            )

        if command == "lookup":
            return ArgumentParser._process_lookup(parsed_args, configuration, server)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_server_arguments(parser: argparse.ArgumentParser) -> None:
        """Apply shared server and identity options."""

        _ = parser.add_argument(
            "--cgi",
            type=str,
            metavar="URL",
            help="FreeDB-compatible CGI endpoint URL (e.g., http://gnudb.gnudb.org/~cddb/cddb.cgi)",
        )
        _ = parser.add_argument(
            "--user",
            type=str,
            help="Username to send in the hello parameter (required)",
        )
        _ = parser.add_argument(
            "--host",
            type=str,
            help="Hostname to send in the hello parameter (required)",
        )
        _ = parser.add_argument(
            "--encoding",
            type=str,
            metavar="NAME",
            help="Response encoding: euc-jp (default), shift_jis, utf-8, etc.",
        )
        _ = parser.add_argument(
            "--out-encoding",
            type=str,
            metavar="NAME",
            help="Encoding for the saved XMCD (default: same as --encoding)",
        )
        _ = parser.add_argument(
            "--proto",
            type=int,
            metavar="LEVEL",
            help="CDDB protocol level (default: 6)",
        )

    @staticmethod
    def _add_toc_argument(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--toc",
            type=str,
            metavar="PATH",
            help="Path to TOC JSON file with { trackOffsetsFrames: number[], leadoutOffsetFrames: number }",
        )

    @staticmethod
    def _add_xmcd_out_argument(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--xmcd-out",
            type=str,
            metavar="DIR",
            help="Save fetched data as an .xmcd file under the specified directory",
        )

    @staticmethod
    def _add_verbosity_arguments(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show request and response details",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _optional_path(value: str | None) -> Path | None:
        return Path(value) if value else None

    @staticmethod
    def _xmcd_out_dir(parsed_args: argparse.Namespace, configuration: Config) -> Path | None:
        if parsed_args.xmcd_out:
            return Path(parsed_args.xmcd_out)
        return configuration.xmcd_out_dir

    @staticmethod
    def _resolve_server(parsed_args: argparse.Namespace, configuration: Config) -> ServerOptions:
        """Merge flags over config over built-in defaults."""

        cgi_url = parsed_args.cgi or configuration.cgi_url or DEFAULT_CGI_URL
        user = parsed_args.user or configuration.hello_user
        host = parsed_args.host or configuration.hello_host
        if not user or not user.strip() or not host or not host.strip():
            logger.error("--user and --host are required (or set hello_user/hello_host in config).")
            sys.exit(1)

        proto_level = (
            parsed_args.proto
            if parsed_args.proto is not None
            else configuration.proto_level or DEFAULT_PROTO_LEVEL
        )
        if proto_level <= 0:
            logger.error("Protocol level must be a positive integer; received %s", proto_level)
            sys.exit(1)

        encoding = parsed_args.encoding or configuration.encoding or DEFAULT_RESPONSE_ENCODING
        output_encoding = parsed_args.out_encoding or configuration.output_encoding or encoding

        return ServerOptions(
            cgi_url=cgi_url,
            user=user,
            host=host,
            app_name=configuration.app_name or APP_NAME,
            app_version=configuration.app_version or APP_VERSION,
            proto_level=proto_level,
            encoding=encoding,
            output_encoding=output_encoding,
        )

    @staticmethod
    def _process_lookup(
        parsed_args: argparse.Namespace,
        configuration: Config,
        server: ServerOptions,
    ) -> LookupArgs:
        if parsed_args.match < 1:
            logger.error("Match number must be a positive integer; received %s", parsed_args.match)
            sys.exit(1)

        cdplayer_ini_path = (
            Path(parsed_args.cdplayer_ini)
            if parsed_args.cdplayer_ini
            else configuration.cdplayer_ini_path
        )

        return LookupArgs(
            command="lookup",
            server=server,
            toc_path=ArgumentParser._optional_path(parsed_args.toc),
            match_index=parsed_args.match - 1,
            xmcd_out_dir=ArgumentParser._xmcd_out_dir(parsed_args, configuration),
            cdplayer_ini_path=cdplayer_ini_path,
            volume_serial=parsed_args.volume_serial,
            cdplayer_ini_encoding=parsed_args.ini_encoding,
            quiet=bool(parsed_args.quiet),
            track_title_overrides=parsed_args.track_titles,
        )

    @staticmethod
    def _process_serialize(parsed_args: argparse.Namespace) -> SerializeArgs:
        xmcd_path = Path(parsed_args.xmcd_path)
        if not xmcd_path.is_file():
            logger.error("XMCD file does not exist: %s", xmcd_path)
            sys.exit(1)

        return SerializeArgs(
            command="serialize",
            xmcd_path=xmcd_path,
            toc_path=ArgumentParser._optional_path(parsed_args.toc),
            category=parsed_args.category,
            disc_id=parsed_args.disc_id,
            input_encoding=parsed_args.input_encoding,
            app_name=APP_NAME if parsed_args.submitted_via else None,
            app_version=APP_VERSION if parsed_args.submitted_via else None,
            terminate=bool(parsed_args.terminate),
        )
