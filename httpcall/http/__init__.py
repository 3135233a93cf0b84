"""
HTTP Client Module

requests-backed client and the GET/POST dispatcher.
"""

from .client import HttpClient, ResponseView
from .dispatcher import build_body_map, send

__all__ = [
    "HttpClient",
    "ResponseView",
    "build_body_map",
    "send",
]
