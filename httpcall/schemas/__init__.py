"""
Module 01 - Schemas

Request argument model, content types and the error taxonomy.
"""

from .content_type import ContentType, JSON_ESSENCE
from .errors import (
    ErrorCodes,
    HttpcallException,
    InvalidUrl,
    MalformedPair,
    ParseError,
    RenderError,
    TransportError,
)
from .request import (
    GetRequest,
    KvPair,
    PostRequest,
    RequestSpec,
    parse_kv_pair,
    validate_url,
)

__all__ = [
    # Content types
    "ContentType",
    "JSON_ESSENCE",
    # Errors
    "ErrorCodes",
    "HttpcallException",
    "InvalidUrl",
    "MalformedPair",
    "ParseError",
    "RenderError",
    "TransportError",
    # Requests
    "GetRequest",
    "KvPair",
    "PostRequest",
    "RequestSpec",
    "parse_kv_pair",
    "validate_url",
]
