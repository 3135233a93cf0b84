"""
Response Renderer

Prints a ResponseView to the terminal: status line, headers, then the
body. JSON bodies (exact application/json content type) are
pretty-printed and highlighted; everything else is written verbatim.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, TYPE_CHECKING

from httpcall.config import DEFAULT_STYLE
from httpcall.schemas.content_type import ContentType

from .formatting import highlight_json, paint, pretty_print_json

if TYPE_CHECKING:
    from httpcall.http.client import ResponseView


logger = logging.getLogger(__name__)


STATUS_COLOR = "blue"
HEADER_NAME_COLOR = "green"


def render_status(resp: "ResponseView", out: TextIO, color: bool = True) -> None:
    out.write(paint(resp.status_line, STATUS_COLOR, color))
    out.write("\n\n")


def render_headers(resp: "ResponseView", out: TextIO, color: bool = True) -> None:
    for name, value in resp.headers:
        out.write(f"{paint(name, HEADER_NAME_COLOR, color)}: {value}\n")
    out.write("\n")


def render_body(
    content_type: Optional[ContentType],
    body: str,
    out: TextIO,
    *,
    color: bool = True,
    style: str = DEFAULT_STYLE,
) -> None:
    """
    Write the body according to its content type.

    The JSON branch formats everything before writing, so a RenderError
    leaves no partial body on out.
    """
    if content_type is not None and content_type.is_json():
        pretty = pretty_print_json(body) + "\n"
        if color:
            pretty = highlight_json(pretty, style)
        out.write(pretty)
        out.write("\n")
        return

    logger.debug(f"Writing body verbatim (content type: {content_type})")
    out.write(body)
    out.write("\n")


def render(
    resp: "ResponseView",
    out: Optional[TextIO] = None,
    *,
    color: bool = True,
    style: str = DEFAULT_STYLE,
) -> None:
    """
    Print a full response.

    Args:
        resp: Response to print; it is not modified
        out: Destination stream (default: sys.stdout)
        color: Emit ANSI colors and JSON highlighting
        style: Pygments style name for JSON highlighting

    Raises:
        RenderError: If a JSON body cannot be parsed or highlighted
    """
    if out is None:
        out = sys.stdout

    render_status(resp, out, color)
    render_headers(resp, out, color)

    content_type = ContentType.from_header(resp.get_header("Content-Type"))
    render_body(content_type, resp.text, out, color=color, style=style)
    out.flush()
