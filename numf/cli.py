"""Command-line interface for numf.

WHY: numf is used from the terminal and in pipelines. The CLI wires the
parser and the formatter registry together behind one command:
``numf -xp 1337`` prints ``0x539``, ``echo 0b1010 | numf -d`` prints ``10``.

HOW: Uses argparse for the output notation flags (mutually exclusive),
the prefix/padding/case switches, and an optional forced input
notation. Numbers come from positional arguments, or from stdin when
none are given. Each token is parsed and formatted independently;
failures are reported to stderr and the loop moves on.

RULES:
- One output line per successfully converted token, in input order
- Errors go to stderr as ``Error: <message>``; stdout stays pipeable
- Exit status: 0 all converted, 1 any token failed, 2 usage error
- Environment defaults (numf.config) apply only where no flag is given
- Raw output is written to the binary stdout buffer
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO, Iterator, List, Optional

from numf import __version__, config
from numf.core.errors import NumfError
from numf.core.formats import Format, format_names
from numf.core.parser import parse_number
from numf.formatters import FORMATTERS
from numf.formatters.base import FormatOptions

logger = logging.getLogger(__name__)

_OUTPUT_FLAGS = (
    ("-x", "--hex", Format.HEX, "format to hexadecimal (default)"),
    ("-b", "--bin", Format.BIN, "format to binary"),
    ("-o", "--oct", Format.OCT, "format to octal"),
    ("-d", "--dec", Format.DEC, "format to decimal"),
    ("-s", "--base64", Format.BASE64, "format to base64"),
    ("-z", "--base32", Format.BASE32, "format to base32"),
    ("-r", "--raw", Format.RAW, "write the raw big-endian bytes"),
)

_EPILOG = """\
input prefixes:
  (none) or 0d  decimal
  0x            hexadecimal
  0b            binary
  0o            octal
  0s            base64
  032s          base32

Underscores are ignored, so 0xdead_beef is fine. Without NUMBER
arguments, numbers are read from stdin, separated by whitespace.
"""


def _error(msg: str) -> None:
    """Print an error message to stderr."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def _format_type(name: str) -> Format:
    """argparse type= callback turning a format name into a Format."""
    try:
        return Format.from_name(name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _iter_tokens(numbers: List[str], stdin: IO[str], raw_input: bool) -> Iterator[str | bytes]:
    """Yield the tokens to convert, from argv or else from stdin.

    Raw input reads the binary buffer and keeps each line whole (minus its
    line ending), since whitespace and undecodable bytes are part of the
    value. Every other notation splits text lines on whitespace.
    """
    if numbers:
        yield from numbers
        return

    if raw_input:
        for raw_line in stdin.buffer:
            yield raw_line.rstrip(b"\r\n")
        return

    for line in stdin:
        yield from line.split()


def _write(rendered: str | bytes, stdout: IO[str]) -> None:
    if isinstance(rendered, bytes):
        stdout.flush()
        stdout.buffer.write(rendered + b"\n")
        stdout.buffer.flush()
    else:
        print(rendered, file=stdout)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable, since tests can inspect the parser without converting anything.

    RULES:
    - Output notation flags form a mutually exclusive group
    - Short flags combine: ``-xpP`` is hex, prefixed, padded
    - Switch defaults come from numf.config
    """
    parser = argparse.ArgumentParser(
        prog="numf",
        description="Convert numbers between hexadecimal, binary, octal, decimal, "
                    "base64, base32 and raw bytes.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    group = parser.add_mutually_exclusive_group()
    for short, long, fmt, help_text in _OUTPUT_FLAGS:
        group.add_argument(
            short,
            long,
            dest="output_format",
            action="store_const",
            const=fmt,
            help=help_text,
        )

    parser.add_argument(
        "-p",
        "--prefix",
        action=argparse.BooleanOptionalAction,
        default=config.DEFAULT_PREFIX,
        help="add a prefix like '0x' for hex.",
    )

    parser.add_argument(
        "-P",
        "--padding",
        action=argparse.BooleanOptionalAction,
        default=config.DEFAULT_PADDING,
        help="zero-pad hex and binary output to whole bytes.",
    )

    parser.add_argument(
        "--uppercase",
        action=argparse.BooleanOptionalAction,
        default=config.DEFAULT_UPPERCASE,
        help="upper-case hex digits.",
    )

    parser.add_argument(
        "-f",
        "--from",
        dest="input_format",
        type=_format_type,
        default=None,
        metavar="FORMAT",
        help="parse every number as FORMAT instead of detecting it from the prefix. "
             "Available: {}.".format(", ".join(format_names())),
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug information to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    parser.add_argument(
        "numbers",
        nargs="*",
        metavar="NUMBER",
        help="numbers to format; read from stdin when omitted.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    Args:
        argv: Command-line arguments; None means sys.argv[1:].

    Returns:
        The process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    # Decimal text conversion is otherwise capped at a few thousand digits
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    output_format = args.output_format
    if output_format is None:
        try:
            output_format = Format.from_name(config.DEFAULT_FORMAT)
        except ValueError as e:
            parser.error("NUMF_DEFAULT_FORMAT: {}".format(e))

    options = FormatOptions(
        prefix=args.prefix,
        padding=args.padding,
        uppercase=args.uppercase,
    )
    formatter = FORMATTERS[output_format]()
    logger.debug("Formatting as %s with %s", formatter.name, options)

    converted = 0
    failed = 0
    for token in _iter_tokens(args.numbers, sys.stdin, args.input_format is Format.RAW):
        try:
            value = parse_number(token, args.input_format)
        except NumfError as e:
            logger.debug("Failed to parse %r", token, exc_info=True)
            _error(str(e))
            failed += 1
            continue
        _write(formatter.format(value, options), sys.stdout)
        converted += 1

    logger.debug("Converted %d value(s), %d failed", converted, failed)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
