"""
Shared plumbing for the request commands.
"""

from __future__ import annotations

import logging

from httpcall.config import RuntimeConfig
from httpcall.http import HttpClient, send
from httpcall.render import render
from httpcall.schemas.request import RequestSpec


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def execute(spec: RequestSpec, config: RuntimeConfig) -> None:
    """Send one request and print the response to stdout."""
    logger.info(f"Dispatching {spec.method} {spec.url}")
    with HttpClient(config=config.http) as client:
        response = send(client, spec)
    render(response, color=config.render.color, style=config.render.style)
