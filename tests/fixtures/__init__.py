"""
Test fixtures package for httpcall tests.

Usage:
    from fixtures import make_response_view, strip_ansi

    def test_something():
        resp = make_response_view('{"a": 1}', content_type="application/json")
"""

from .common import (
    make_requests_response,
    make_response_view,
    strip_ansi,
)

__all__ = [
    "make_requests_response",
    "make_response_view",
    "strip_ansi",
]
