"""
httpcall CLI

Command-line interface for httpcall.

Usage:
    python -m httpcall_cli get https://httpbin.org/get
    python -m httpcall_cli post https://httpbin.org/post a=1 b=2
"""

from httpcall import __version__

__all__ = ["__version__"]
