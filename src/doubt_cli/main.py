"""
CLI main entry point for the doubt diff tool.

Thin wrapper around the core package - no business logic here.
"""

import argparse
import logging
import sys

from doubt import ConflictPolicy, DiffRequest, Output, ParseError, TokenParser

from .output import print_request_json, print_request_summary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the parser for the tool's own options.

    Files and output flags are not declared here: argparse cannot keep them
    interleaved, so they are left unrecognised and handed to TokenParser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="doubt",
        description="Resolve the inputs and output mode of a two-way diff.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Diff arguments:
  FILE                 input to compare ("-" reads stdin); give exactly two
  -u, --unified        render as a unified diff (default)
  -s, --split          render side by side
  --                   treat every following argument as a file

Examples:
  %(prog)s old.txt new.txt
  %(prog)s --split old.txt new.txt
  %(prog)s old.txt -u new.txt --format json
        """,
    )

    parser.add_argument(
        "-f",
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Result format (default: text)",
    )

    parser.add_argument(
        "--on-conflict",
        type=str,
        choices=[policy.value for policy in ConflictPolicy],
        default=ConflictPolicy.REJECT.value,
        help="What to do when both --unified and --split are given (default: reject)",
    )

    parser.add_argument(
        "--default-output",
        type=str,
        choices=[mode.value for mode in Output],
        default=Output.UNIFIED.value,
        help="Output mode when no output flag is given (default: unified)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity on stderr (default: WARNING)",
    )

    return parser


def parse_arguments(argv: list[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    """
    Split command-line arguments into tool options and diff tokens.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Everything from the first "--" on is passed to TokenParser untouched,
    "--" included, so tool options are only read before it.

    Returns:
        Parsed options and the remaining tokens in their original order
    """
    if argv is None:
        argv = sys.argv[1:]

    if "--" in argv:
        split = argv.index("--")
        head, tail = list(argv[:split]), list(argv[split:])
    else:
        head, tail = list(argv), []

    args, tokens = build_parser().parse_known_args(head)
    return args, tokens + tail


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """
    Main CLI entry point.

    Orchestrates the CLI workflow:
    1. Parse tool options
    2. Parse diff tokens into an argument chain
    3. Build the diff request
    4. Display the request
    """
    args, tokens = parse_arguments(argv)
    configure_logging(args.log_level)
    logger.debug("Diff tokens: %s", tokens)

    try:
        chain = TokenParser().parse(tokens)
        request = DiffRequest.from_chain(
            chain,
            policy=ConflictPolicy(args.on_conflict),
            default=Output(args.default_output),
        )
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.format == "json":
        print_request_json(request, chain)
    else:
        print_request_summary(request, chain)


if __name__ == "__main__":
    main()
