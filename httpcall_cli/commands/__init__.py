"""
CLI command modules.
"""

from httpcall_cli.commands import get, post

__all__ = ["get", "post"]
