"""
CLI for selecting a range of pages from a text stream.
"""

import logging
import os
import sys

from .. import config
from ..errors import ConfigurationError, SelpgError
from ..readers import create_page_reader, open_input
from ..selector import PageSelector
from ..settings import SelectionConfig, validate_config
from ..sinks import create_sink
from ..stats import SelectionStats
from ..utils import BaseArgumentParser, configure_logging_level, setup_logging

PROG = "selpg"

EPILOG = f"""\
Pages are numbered from 0. Without -f a page is {config.DEFAULT_PAGE_LENGTH} lines
unless -l says otherwise; with -f pages are separated by form feeds (\\f).
In -f mode pages are picked by position, so -s 2 skips the first two
chunks, and text after the last form feed is printed as a final page.
Input bytes are copied unchanged, whatever their encoding.
If no file is given, {PROG} reads standard input (Control-D to end).

Consumers for -d:
""" + "\n".join(
    f"  {name:<8} runs: {' '.join(argv)}" for name, argv in config.CONSUMER_COMMANDS.items()
) + """
  any other value is run as a command.

Examples:
  selpg -s 0 -e 1 report.txt
  selpg -s=2 -e=4 -l 20 report.txt
  selpg -s 1 -e 1 -f -d lineno report.txt
  cat report.txt | selpg -s 0 -e 0
"""


def create_parser():
    """Create argument parser for selpg."""
    parser = BaseArgumentParser.create_base_parser(
        prog=PROG,
        description="Select a range of pages from a file or standard input.",
        epilog=EPILOG
    )

    parser.add_argument(
        "-s", "--start-page",
        type=int,
        default=config.UNSET_PAGE,
        metavar="NUMBER",
        help="First page to select (required)"
    )
    parser.add_argument(
        "-e", "--end-page",
        type=int,
        default=config.UNSET_PAGE,
        metavar="NUMBER",
        help="Last page to select, inclusive (required)"
    )
    parser.add_argument(
        "-l", "--page-length",
        type=int,
        default=config.DEFAULT_PAGE_LENGTH,
        metavar="NUMBER",
        help=f"Lines per page (default: {config.DEFAULT_PAGE_LENGTH})"
    )
    parser.add_argument(
        "-f", "--form-feed",
        action="store_true",
        help="Pages are separated by form feeds instead of line counts"
    )
    parser.add_argument(
        "-d", "--destination",
        default="",
        metavar="CONSUMER",
        help="Pipe the selection into a consumer name or command instead of printing it"
    )

    BaseArgumentParser.add_input_path_argument(
        parser,
        required=False,
        help="Input file (default: standard input)"
    )
    BaseArgumentParser.add_verbose_quiet_arguments(parser)

    return parser


def run_selection(selection: SelectionConfig) -> SelectionStats:
    """
    Run one selection from the configured input to the configured sink.

    A consumer process is started before input is opened and is always
    finished, closing its input exactly once, even when reading fails.

    Args:
        selection: Validated selection parameters

    Returns:
        Statistics for the run

    Raises:
        SelpgError: On input or consumer failures
    """
    sink = create_sink(selection)
    try:
        with open_input(selection) as stream:
            reader = create_page_reader(stream, selection)
            selector = PageSelector(selection, drain_input=selection.reads_stdin)
            return selector.run(reader, sink)
    finally:
        sink.finish()


def _fail(message: str, exit_code: int, parser=None) -> None:
    print(f"{PROG}: {message}", file=sys.stderr)
    if parser is not None:
        print(file=sys.stderr)
        parser.print_help(sys.stderr)
    sys.exit(exit_code)


def main():
    """Main entry point for selpg command."""
    setup_logging()
    parser = create_parser()
    args = parser.parse_args()

    configure_logging_level(args)

    try:
        selection = validate_config(
            start_page=args.start_page,
            end_page=args.end_page,
            page_length=args.page_length,
            form_feed=args.form_feed,
            input_path=args.input_path,
            consumer=args.destination,
        )
    except ConfigurationError as e:
        _fail(e.message, e.exit_code, parser)

    try:
        run_selection(selection)
    except SelpgError as e:
        logging.debug(f"Selection failed: {e}")
        _fail(e.message, e.exit_code)
    except BrokenPipeError:
        # Downstream closed stdout; silence the interpreter's flush at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(config.EXIT_FAILURE)
    except KeyboardInterrupt:
        logging.info("Operation cancelled by user.")
        sys.exit(config.EXIT_FAILURE)


if __name__ == "__main__":
    main()
