"""Main CLI entry point for the rez command-line tool.

Provides HTML escaping of files or standard input and concatenation of
command-line values, sharing the library's configuration file format.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from rez import __version__
from rez.shared.config import ConfigError, RezConfig
from rez.shared.errors import RezError
from rez.shared.logging import configure_logging, get_logger
from rez.text.concat import SequenceConcatenator
from rez.text.escape import HtmlEscaper, escape_html_bytes
from rez.values.stringify import ValueStringifier

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT

STDIN_MARKER = "-"


def _is_utf8(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


class TextProcessor:
    """Runs the escaper and concatenator for CLI operations."""

    def __init__(self, config: RezConfig):
        self.config = config
        self.logger = get_logger(__name__, config.correlation_id, "cli_processor")

        stringifier = ValueStringifier(config.stringify, config.correlation_id)
        self.escaper = HtmlEscaper(config.escape, stringifier, config.correlation_id)
        self.concatenator = SequenceConcatenator(
            config.concat, stringifier, config.correlation_id
        )

    def read_input(self, path: Path) -> bytes:
        """Read raw bytes from a file, or from stdin for ``-``."""
        if str(path) == STDIN_MARKER:
            return sys.stdin.buffer.read()
        return path.read_bytes()

    def escape_sources(self, paths: List[Path], raw_bytes: bool = False) -> bytes:
        """Escape every source in order and return the joined UTF-8 output.

        Without ``raw_bytes`` each source is decoded as UTF-8 and invalid
        sequences become U+FFFD.
        """
        chunks = []
        for path in paths or [Path(STDIN_MARKER)]:
            try:
                data = self.read_input(path)
            except OSError:
                self.logger.error("Failed to read source", extra={"source": str(path)})
                raise

            if raw_bytes:
                chunks.append(escape_html_bytes(data))
                continue

            if not _is_utf8(data):
                self.logger.warning(
                    "Source is not valid UTF-8, invalid bytes replaced with U+FFFD "
                    "(use --bytes to keep them)",
                    extra={"source": str(path)}
                )
            result = self.escaper.escape_detailed(data)
            chunks.append(result.text.encode("utf-8"))
            self.logger.info(
                "Escaped source",
                extra={"source": str(path), **result.statistics}
            )
        return b"".join(chunks)

    def concat_values(self, values: List[str], parse_json: bool = False) -> str:
        """Concatenate command-line values, optionally decoding each as JSON."""
        items: List[Any] = values
        if parse_json:
            items = [json.loads(value) for value in values]
        return self.concatenator.concat(items)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="rez",
        description="Value concatenation and HTML escaping"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON configuration file path"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    escape_parser = subparsers.add_parser("escape", help="HTML-escape files or stdin")
    escape_parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Files to escape (default: stdin, or '-')"
    )
    escape_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    escape_parser.add_argument(
        "--bytes",
        action="store_true",
        dest="raw_bytes",
        help=(
            "Escape byte by byte without decoding the input "
            "(default mode replaces invalid UTF-8 with U+FFFD)"
        )
    )

    concat_parser = subparsers.add_parser("concat", help="Concatenate values")
    concat_parser.add_argument(
        "values",
        nargs="*",
        help="Values to concatenate"
    )
    concat_parser.add_argument(
        "--json",
        action="store_true",
        dest="parse_json",
        help="Decode each value as JSON before stringifying it"
    )

    return parser


def load_config(args: argparse.Namespace) -> RezConfig:
    """Load configuration from ``--config`` and apply verbosity flags."""
    config = RezConfig.from_file(args.config) if args.config else RezConfig.default()
    if args.verbose:
        config = config.override(logging_level="DEBUG")
    elif args.quiet:
        config = config.override(logging_level="ERROR")
    return config


def cmd_escape(args: argparse.Namespace, config: RezConfig) -> int:
    """Handle escape command."""
    processor = TextProcessor(config)
    output = processor.escape_sources(args.paths, args.raw_bytes)

    if args.output:
        args.output.write_bytes(output)
        print(f"Escaped output written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.buffer.write(output)
        sys.stdout.flush()
    return EXIT_OK


def cmd_concat(args: argparse.Namespace, config: RezConfig) -> int:
    """Handle concat command."""
    processor = TextProcessor(config)
    try:
        print(processor.concat_values(args.values, args.parse_json))
    except json.JSONDecodeError as e:
        print(f"Invalid JSON value: {e}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(config.logging_level)

    try:
        if args.command == "escape":
            return cmd_escape(args, config)
        if args.command == "concat":
            return cmd_concat(args, config)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_USAGE

    except (RezError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
