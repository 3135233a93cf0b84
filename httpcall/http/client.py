"""
HTTP Client

Thin wrapper over a requests session: applies the fixed client headers,
converts transport failures to TransportError, and snapshots each
response into a ResponseView for rendering.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from httpcall.config import HttpConfig
from httpcall.schemas.content_type import ContentType
from httpcall.schemas.errors import TransportError


logger = logging.getLogger(__name__)


# urllib3 reports the protocol version as an integer
_HTTP_VERSIONS = {
    9: "HTTP/0.9",
    10: "HTTP/1.0",
    11: "HTTP/1.1",
    20: "HTTP/2",
    30: "HTTP/3",
}


def declared_charset(content_type: Optional[str]) -> Optional[str]:
    """
    Charset named in a Content-Type header, if any.

    requests guesses ISO-8859-1 for text/* without a charset; that guess
    is ignored here so undeclared bodies decode as UTF-8.
    """
    parsed = ContentType.from_header(content_type)
    if parsed is None:
        return None
    return dict(parsed.params).get("charset")


@dataclass
class ResponseView:
    """
    Read-only snapshot of a received response.
    """
    status_code: int
    content: bytes
    reason: str = ""
    http_version: str = "HTTP/1.1"
    headers: list[tuple[str, str]] = field(default_factory=list)
    encoding: Optional[str] = None
    url: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    @property
    def status_line(self) -> str:
        """Protocol version, status code and reason phrase."""
        return " ".join(p for p in (self.http_version, str(self.status_code), self.reason) if p)

    @property
    def text(self) -> str:
        """Get response content as text."""
        encoding = self.encoding or "utf-8"
        try:
            return self.content.decode(encoding, errors="replace")
        except LookupError:
            # Unknown charset label
            return self.content.decode("utf-8", errors="replace")

    def get_header(self, name: str) -> Optional[str]:
        """First value of a header, matched case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @classmethod
    def from_requests(cls, response: requests.Response) -> "ResponseView":
        """Snapshot a requests.Response."""
        raw = getattr(response, "raw", None)
        version = _HTTP_VERSIONS.get(getattr(raw, "version", None), "HTTP/1.1")

        # Prefer the urllib3 headers, which keep repeated fields separate
        raw_headers = getattr(raw, "headers", None)
        if isinstance(raw_headers, Mapping):
            headers = [(str(k), str(v)) for k, v in raw_headers.items()]
        else:
            headers = [(str(k), str(v)) for k, v in response.headers.items()]

        return cls(
            status_code=response.status_code,
            content=response.content,
            reason=response.reason or "",
            http_version=version,
            headers=headers,
            encoding=declared_charset(response.headers.get("Content-Type")),
            url=str(response.url),
            elapsed_ms=response.elapsed.total_seconds() * 1000,
        )


class HttpClient:
    """
    HTTP client with fixed default headers.

    Usage:
        with HttpClient(config=HttpConfig()) as client:
            response = client.get("https://httpbin.org/get")
    """

    def __init__(
        self,
        *,
        config: Optional[HttpConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            config: Timeout, proxy and header settings
            session: Pre-built session, mainly for tests
        """
        self.config = config or HttpConfig()
        self.default_headers = self.config.default_headers()
        self._session = session

    def _get_session(self) -> requests.Session:
        """Lazy-load requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(self.default_headers)
            if self.config.proxy:
                self._session.proxies = {
                    "http": self.config.proxy,
                    "https": self.config.proxy,
                }
        return self._session

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[dict[str, str]] = None,
        json: Optional[Any] = None,
    ) -> ResponseView:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, POST)
            url: Request URL
            headers: Additional headers
            json: Request body, serialized as a JSON object

        Returns:
            ResponseView with status, headers and content

        Raises:
            TransportError: On DNS, connection, TLS or timeout failures
        """
        session = self._get_session()

        # Merge headers
        request_headers = dict(self.default_headers)
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method} {url}")
        try:
            response = session.request(
                method=method,
                url=url,
                headers=request_headers,
                json=json,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise TransportError(str(e), url=url) from e

        result = ResponseView.from_requests(response)
        logger.info(f"{method} {url} -> {result.status_code} ({result.elapsed_ms:.0f} ms)")
        return result

    def get(
        self,
        url: str,
        *,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseView:
        """Make a GET request."""
        return self.request("GET", url, headers=headers)

    def post(
        self,
        url: str,
        *,
        headers: Optional[dict[str, str]] = None,
        json: Optional[Any] = None,
    ) -> ResponseView:
        """Make a POST request."""
        return self.request("POST", url, headers=headers, json=json)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
