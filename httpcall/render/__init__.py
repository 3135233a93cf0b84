"""
Rendering Module

Terminal output for received responses.
"""

from .formatting import highlight_json, pretty_print_json
from .renderer import render, render_body

__all__ = [
    "highlight_json",
    "pretty_print_json",
    "render",
    "render_body",
]
