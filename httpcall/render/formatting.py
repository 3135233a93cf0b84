"""
Body Formatting

JSON pretty-printing and Pygments highlighting for terminal output.
"""

from __future__ import annotations

import json
from decimal import Decimal

import pygments
from pygments.console import colorize
from pygments.formatters.terminal256 import TerminalTrueColorFormatter
from pygments.lexers.data import JsonLexer
from pygments.util import ClassNotFound

from httpcall.config import DEFAULT_STYLE
from httpcall.schemas.errors import RenderError


INDENT = 2

# Insignificant whitespace per RFC 8259
_JSON_WHITESPACE = " \t\r\n"
_CLOSERS = {"{": "}", "[": "]"}


def _reject_constant(name: str) -> None:
    raise RenderError(
        f"Response body is not valid JSON: {name} is not a JSON value",
        details={"constant": name},
    )


def check_json(text: str) -> None:
    """
    Raise RenderError unless text is a strict JSON document.

    NaN, Infinity and -Infinity are rejected.
    """
    try:
        json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=Decimal,
            object_pairs_hook=list,
        )
    except json.JSONDecodeError as e:
        raise RenderError(
            f"Response body is not valid JSON: {e.msg} at line {e.lineno} column {e.colno}",
            details={"position": e.pos},
        ) from e


def reindent_json(text: str) -> str:
    """
    Re-layout valid JSON text token by token.

    Strings, numbers and literals are copied exactly as written; only
    whitespace between tokens changes. Empty objects and arrays stay on
    one line.
    """
    out: list[str] = []
    depth = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"':
            j = i + 1
            while text[j] != '"':
                j += 2 if text[j] == "\\" else 1
            out.append(text[i:j + 1])
            i = j + 1
            continue
        if ch in _JSON_WHITESPACE:
            i += 1
            continue
        if ch in _CLOSERS:
            k = i + 1
            while text[k] in _JSON_WHITESPACE:
                k += 1
            if text[k] == _CLOSERS[ch]:
                out.append(ch + text[k])
                i = k + 1
                continue
            depth += 1
            out.append(ch + "\n" + " " * (INDENT * depth))
        elif ch in "}]":
            depth -= 1
            out.append("\n" + " " * (INDENT * depth) + ch)
        elif ch == ",":
            out.append(",\n" + " " * (INDENT * depth))
        elif ch == ":":
            out.append(": ")
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def pretty_print_json(text: str) -> str:
    """
    Re-indent a JSON document with two spaces per level.

    Only whitespace between tokens changes: key order, duplicate keys,
    number spelling and string escapes are kept as the server sent
    them. Text that is already in this form comes back unchanged. No
    trailing newline is added.

    Raises:
        RenderError: If text is not valid JSON.
    """
    check_json(text)
    return reindent_json(text)


def highlight_json(text: str, style: str = DEFAULT_STYLE) -> str:
    """
    Colorize JSON with 24-bit terminal escapes.

    The result always ends with a newline.

    Raises:
        RenderError: If the style is unknown.
    """
    try:
        formatter = TerminalTrueColorFormatter(style=style)
    except ClassNotFound as e:
        raise RenderError(f"Unknown highlight style: {style!r}", details={"style": style}) from e
    return pygments.highlight(text, JsonLexer(), formatter)


def paint(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in an ANSI color (pygments.console names) when enabled."""
    if not enabled:
        return text
    return colorize(color, text)
