"""
Common test fixtures shared by all modules.

Provides factory functions for:
- ResponseView (what the renderer consumes)
- requests.Response (what the transport returns)
- ANSI escape stripping for rendered output
"""

import re
from datetime import timedelta
from typing import Optional

import requests
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers

from httpcall.http.client import ResponseView


_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove terminal color escapes."""
    return _ANSI_ESCAPE.sub("", text)


def make_response_view(
    body: str = "",
    content_type: Optional[str] = "text/plain",
    status_code: int = 200,
    reason: str = "OK",
    extra_headers: Optional[list[tuple[str, str]]] = None,
) -> ResponseView:
    """Create a ResponseView with an optional Content-Type header."""
    headers: list[tuple[str, str]] = []
    if content_type is not None:
        headers.append(("content-type", content_type))
    headers.append(("content-length", str(len(body.encode("utf-8")))))
    if extra_headers:
        headers.extend(extra_headers)
    return ResponseView(
        status_code=status_code,
        content=body.encode("utf-8"),
        reason=reason,
        http_version="HTTP/1.1",
        headers=headers,
        encoding="utf-8",
        url="https://example.com/",
    )


def make_requests_response(
    body: bytes = b"",
    status_code: int = 200,
    reason: str = "OK",
    headers: Optional[dict[str, str]] = None,
    url: str = "https://example.com/",
) -> requests.Response:
    """
    Create a requests.Response without touching the network.

    The encoding is inferred from the headers the same way requests'
    HTTPAdapter does it.
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = body
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = url
    response.encoding = get_encoding_from_headers(response.headers)
    response.elapsed = timedelta(milliseconds=12)
    return response
