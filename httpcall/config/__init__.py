"""
Runtime Configuration Module

Provides configuration for the HTTP client and renderer.
"""

from .runtime import DEFAULT_STYLE, HttpConfig, RenderConfig, RuntimeConfig

__all__ = [
    "DEFAULT_STYLE",
    "HttpConfig",
    "RenderConfig",
    "RuntimeConfig",
]
