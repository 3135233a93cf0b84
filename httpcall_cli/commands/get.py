"""
CLI Get Command

Usage:
    httpcall get <url>
"""

from __future__ import annotations

from argparse import Namespace

from httpcall.schemas.request import GetRequest

from .common import EXIT_SUCCESS, execute


def get_cmd(args: Namespace) -> int:
    """Handle get command."""
    spec = GetRequest(url=args.url)
    execute(spec, args.cli_config.runtime)
    return EXIT_SUCCESS
