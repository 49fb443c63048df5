"""Command-line interface for the text formatter.

WHY: Shell scripts, editors and git hooks want to reflow or re-indent text
without writing Python. The CLI exposes each block operation as a
subcommand that reads a file (or stdin) and prints the result.

HOW: Uses argparse with one subcommand per operation. Each subcommand has a
small handler that reads the input, calls the library and returns the text
to print. main() configures logging, dispatches, and turns ValueError /
OSError into an error message and exit status 1.

RULES:
- Usage: python -m format_text <command> [options] [file]
- file defaults to "-" (stdin).
- Input is read as bytes; invalid UTF-8 passes through unchanged.
- Formatted output goes to stdout; status and errors go to stderr.
- Exit codes: 0 = success, 1 = error.
- Python 3.9.6 compatible (no match/case, no X | Y unions).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from . import format_block
from .config import (
    DEFAULT_INDENT,
    DEFAULT_PRESET,
    DEFAULT_WIDTH,
    LOG_LEVEL,
    configure_logging,
    load_layout,
)
from .convert import to_string
from .core import apply_layout, dedent, display_width, indent, prefix, split_lines, wrap
from .presets import PRESETS

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _read_input(path: str) -> str:
    """Read the whole input file, or stdin when path is "-".

    Bytes that are not valid UTF-8 are kept as surrogate escapes by
    to_string() and written back out unchanged by main().
    """
    if path == "-":
        data = sys.stdin.buffer.read()
    else:
        with open(path, "rb") as f:
            data = f.read()
    return to_string(data)


# =============================================================================
# Command Handlers
# =============================================================================

def _cmd_wrap(args: argparse.Namespace) -> str:
    result = wrap(_read_input(args.file), args.width)
    if args.count:
        _status("{} words".format(result.count))
    return result.text


def _cmd_dedent(args: argparse.Namespace) -> str:
    return dedent(_read_input(args.file))


def _cmd_indent(args: argparse.Namespace) -> str:
    return indent(_read_input(args.file), args.spaces)


def _cmd_prefix(args: argparse.Namespace) -> str:
    return prefix(_read_input(args.file), args.literal)


def _cmd_lines(args: argparse.Namespace) -> str:
    lines = split_lines(_read_input(args.file))
    if args.number:
        lines = ["{:>6}  {}".format(i, line) for i, line in enumerate(lines, 1)]
    return "\n".join(lines)


def _cmd_width(args: argparse.Namespace) -> str:
    return "\n".join(str(display_width(line)) for line in split_lines(_read_input(args.file)))


def _cmd_format(args: argparse.Namespace) -> str:
    text = _read_input(args.file)
    if args.layout:
        return apply_layout(text, load_layout(args.layout))
    return format_block(text, preset=args.preset)


COMMANDS: Dict[str, Callable[[argparse.Namespace], str]] = {
    "wrap": _cmd_wrap,
    "dedent": _cmd_dedent,
    "indent": _cmd_indent,
    "prefix": _cmd_prefix,
    "lines": _cmd_lines,
    "width": _cmd_width,
    "format": _cmd_format,
}


# =============================================================================
# Argument Parsing
# =============================================================================

def _add_file_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Input file (default: read from stdin).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI.

    RULES:
    - Global: --log-level
    - One subparser per entry in COMMANDS, each with an optional file
    """
    parser = argparse.ArgumentParser(
        prog="format_text",
        description="Wrap, dedent, indent and prefix blocks of text.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: %(default)s).",
    )

    sub = parser.add_subparsers(dest="command", metavar="command")
    sub.required = True

    p = sub.add_parser("wrap", help="Reflow text to a column width.")
    p.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help="Target column width (default: %(default)s). Below 1 only normalizes spaces.",
    )
    p.add_argument(
        "--count",
        action="store_true",
        help="Also report the word count on stderr.",
    )
    _add_file_argument(p)

    p = sub.add_parser("dedent", help="Strip the indentation of the first non-blank line.")
    _add_file_argument(p)

    p = sub.add_parser("indent", help="Prepend spaces to every line.")
    p.add_argument(
        "--spaces",
        type=int,
        default=DEFAULT_INDENT,
        help="Number of spaces (default: %(default)s).",
    )
    _add_file_argument(p)

    p = sub.add_parser("prefix", help="Prepend a literal string to every line.")
    p.add_argument(
        "--with",
        dest="literal",
        required=True,
        help="The literal prefix, e.g. '# '.",
    )
    _add_file_argument(p)

    p = sub.add_parser("lines", help="Print the input split into lines.")
    p.add_argument(
        "--number",
        action="store_true",
        help="Number the lines.",
    )
    _add_file_argument(p)

    p = sub.add_parser("width", help="Print the display width of every line.")
    _add_file_argument(p)

    p = sub.add_parser("format", help="Run the full layout pipeline.")
    p.add_argument(
        "--preset",
        default=DEFAULT_PRESET,
        help="Layout preset. Available: {} (default: %(default)s).".format(
            ", ".join(sorted(PRESETS.keys()))
        ),
    )
    p.add_argument(
        "--layout",
        default=None,
        help="Path to a JSON layout file (overrides --preset).",
    )
    _add_file_argument(p)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    # Surrogate escapes from undecodable input go out as the original bytes
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")

    logger.debug("Running %s on %s", args.command, args.file)
    try:
        output = COMMANDS[args.command](args)
    except (ValueError, OSError) as exc:
        _status("Error: {}".format(exc))
        sys.exit(1)

    if output:
        print(output)


if __name__ == "__main__":
    main()
