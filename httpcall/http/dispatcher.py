"""
Request Dispatcher

Sends one GetRequest or PostRequest through an HttpClient.
"""

from __future__ import annotations

import logging
from typing import Iterable, TYPE_CHECKING

from httpcall.schemas.request import GetRequest, KvPair, PostRequest, RequestSpec

if TYPE_CHECKING:
    from .client import HttpClient, ResponseView


logger = logging.getLogger(__name__)


def build_body_map(pairs: Iterable[KvPair]) -> dict[str, str]:
    """Fold body pairs into a dict; a repeated key keeps its last value."""
    body: dict[str, str] = {}
    for pair in pairs:
        if pair.key in body:
            logger.debug(f"Body key {pair.key!r} repeated, keeping last value")
        body[pair.key] = pair.value
    return body


def send(client: "HttpClient", spec: RequestSpec) -> "ResponseView":
    """
    Issue exactly one request for the given spec.

    Transport failures propagate as TransportError from the client; no
    retries are attempted.
    """
    if isinstance(spec, GetRequest):
        return client.get(spec.url)
    if isinstance(spec, PostRequest):
        return client.post(spec.url, json=build_body_map(spec.body))
    raise TypeError(f"Unsupported request type: {type(spec).__name__}")
