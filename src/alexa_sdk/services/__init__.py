"""Boundary codec and the reference skill."""

from .codec import parse_request, parse_response, render_response, response_to_dict
from .hello_skill import handle_hello_request

__all__ = [
    "parse_request",
    "parse_response",
    "render_response",
    "response_to_dict",
    "handle_hello_request",
]
