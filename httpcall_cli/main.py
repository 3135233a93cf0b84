"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    httpcall get <url>
    httpcall post <url> [key=value ...]
    python -m httpcall_cli get https://httpbin.org/get

Environment Variables:
    HTTPCALL_LOG_LEVEL     Log level (default: WARNING)
    HTTPCALL_LOG_FILE      Also write logs to this file
    HTTPCALL_TIMEOUT       Request timeout in seconds (default: none)
    HTTPCALL_PROXY         Proxy URL for http and https
    HTTPCALL_STYLE         Pygments style for JSON bodies (default: monokai)
    NO_COLOR               Disable colored output
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from typing import Sequence

from httpcall import __version__
from httpcall.schemas.errors import HttpcallException, ParseError
from httpcall.schemas.request import KvPair, parse_kv_pair, validate_url
from httpcall_cli.commands import get, post
from httpcall_cli.commands.common import EXIT_RUNTIME_ERROR
from httpcall_cli.config import load_config


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def url_arg(raw: str) -> str:
    """argparse type for URLs."""
    try:
        return validate_url(raw)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def kv_pair_arg(raw: str) -> KvPair:
    """argparse type for key=value body tokens."""
    try:
        return parse_kv_pair(raw)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="httpcall",
        description="Send a single HTTP request and print the response.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides HTTPCALL_LOG_LEVEL)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print a traceback on unexpected errors",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Disable colors and JSON highlighting",
    )
    parser.add_argument(
        "--style",
        type=str,
        default=None,
        help="Pygments style for JSON bodies (overrides HTTPCALL_STYLE)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- get command ---
    get_parser = subparsers.add_parser(
        "get",
        help="Send a GET request",
        description="Send a GET request and print the response.",
    )
    get_parser.add_argument(
        "url",
        type=url_arg,
        help="Absolute URL, e.g. https://httpbin.org/get",
    )
    get_parser.set_defaults(func=get.get_cmd)

    # --- post command ---
    post_parser = subparsers.add_parser(
        "post",
        help="Send a POST request with a JSON body",
        description="Send a POST request whose key=value pairs form a JSON object body.",
    )
    post_parser.add_argument(
        "url",
        type=url_arg,
        help="Absolute URL, e.g. https://httpbin.org/post",
    )
    post_parser.add_argument(
        "body",
        type=kv_pair_arg,
        nargs="*",
        default=[],
        help="Request body parameters as key=value (later keys win)",
    )
    post_parser.set_defaults(func=post.post_cmd)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error); argparse exits with 2 on bad input
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config()
    except ValueError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Flags override environment
    if args.color is not None:
        config.runtime.render.color = args.color
    if args.style:
        config.runtime.render.style = args.style

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except HttpcallException as e:
        if args.debug:
            traceback.print_exc()
        print(str(e), file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


def entry() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    entry()
