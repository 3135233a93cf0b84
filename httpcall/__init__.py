"""
httpcall

Single-request command-line HTTP client with JSON pretty-printing and
syntax-highlighted terminal output.
"""

__version__ = "0.1.0"
