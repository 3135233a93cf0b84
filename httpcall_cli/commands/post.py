"""
CLI Post Command

Sends the body pairs as a JSON object.

Usage:
    httpcall post <url> [key=value ...]
"""

from __future__ import annotations

from argparse import Namespace

from httpcall.schemas.request import PostRequest

from .common import EXIT_SUCCESS, execute


def post_cmd(args: Namespace) -> int:
    """Handle post command."""
    spec = PostRequest(url=args.url, body=args.body)
    execute(spec, args.cli_config.runtime)
    return EXIT_SUCCESS
