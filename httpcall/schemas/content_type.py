"""
Module 01 - Schemas
File: content_type.py

Purpose: Parsed Content-Type header used to choose how a body is rendered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional


# RFC 7230 token characters
_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

JSON_ESSENCE = "application/json"


@dataclass(frozen=True)
class ContentType:
    """
    A MIME type with optional parameters.

    Type, subtype and parameter names are lowercased. Parameter values
    keep their case with surrounding quotes removed.
    """
    type: str
    subtype: str
    params: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    def is_json(self) -> bool:
        """
        Exact match against application/json.

        Any parameter makes the type distinct, so
        "application/json; charset=utf-8" is not JSON here.
        """
        return self.essence == JSON_ESSENCE and not self.params

    def __str__(self) -> str:
        rendered = [self.essence]
        rendered.extend(f"{name}={value}" for name, value in self.params)
        return "; ".join(rendered)

    @classmethod
    def parse(cls, raw: str) -> Optional["ContentType"]:
        """Parse a header value, returning None if it is not a MIME type."""
        media, *raw_params = raw.split(";")
        type_, sep, subtype = media.strip().partition("/")
        if not sep or not _TOKEN.match(type_) or not _TOKEN.match(subtype):
            return None

        params = []
        for raw_param in raw_params:
            raw_param = raw_param.strip()
            if not raw_param:
                # "application/json;" is not an exact type
                return None
            name, sep, value = raw_param.partition("=")
            name = name.strip()
            value = value.strip()
            if not sep or not _TOKEN.match(name):
                return None
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
            elif not _TOKEN.match(value):
                return None
            params.append((name.lower(), value))

        return cls(type=type_.lower(), subtype=subtype.lower(), params=tuple(params))

    @classmethod
    def from_header(cls, value: str | None) -> Optional["ContentType"]:
        """Parse an optional Content-Type header value."""
        if value is None:
            return None
        return cls.parse(value)
