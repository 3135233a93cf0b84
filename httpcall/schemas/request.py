"""
Module 01 - Schemas
File: request.py

Purpose: Request argument model.
Validates target URLs, parses key=value body tokens, and defines the
GET/POST request variants that the dispatcher consumes.
"""

from typing import Annotated, Literal, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidUrl, MalformedPair


# =============================================================================
# URL Validation
# =============================================================================

def validate_url(raw: str) -> str:
    """
    Check that raw is an absolute URL with a scheme and a host.

    The input is returned unchanged; nothing is normalized.

    Raises:
        InvalidUrl: If the string is not an absolute URL.
    """
    # urlsplit silently drops these
    if any(ch in raw for ch in "\t\r\n"):
        raise InvalidUrl(raw, "control character in URL")
    try:
        parts = urlsplit(raw)
        # Accessing .port validates it
        parts.port
    except ValueError as e:
        raise InvalidUrl(raw, str(e)) from e

    if not parts.scheme:
        raise InvalidUrl(raw, "missing scheme")
    if not parts.hostname:
        raise InvalidUrl(raw, "missing host")
    if any(ch.isspace() for ch in parts.netloc):
        raise InvalidUrl(raw, "whitespace in host")
    return raw


# =============================================================================
# Body Pairs
# =============================================================================

class KvPair(BaseModel):
    """A single key=value request body parameter."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    value: str

    @classmethod
    def parse(cls, raw: str) -> "KvPair":
        """
        Split a token on its first '='.

        The value may itself contain '='. An empty key ("=value") is
        accepted.

        Raises:
            MalformedPair: If the token has no '='.
        """
        key, sep, value = raw.partition("=")
        if not sep:
            raise MalformedPair(raw)
        return cls(key=key, value=value)


def parse_kv_pair(raw: str) -> KvPair:
    """Parse one command-line body token."""
    return KvPair.parse(raw)


# =============================================================================
# Request Variants
# =============================================================================

class _RequestBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str = Field(..., description="Absolute URL the request is sent to")

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: str) -> str:
        return validate_url(v)


class GetRequest(_RequestBase):
    """GET request with no body."""

    method: Literal["GET"] = "GET"


class PostRequest(_RequestBase):
    """POST request whose body pairs are sent as a JSON object."""

    method: Literal["POST"] = "POST"
    body: list[KvPair] = Field(
        default_factory=list,
        description="Body parameters in command-line order",
    )


RequestSpec = Annotated[Union[GetRequest, PostRequest], Field(discriminator="method")]
