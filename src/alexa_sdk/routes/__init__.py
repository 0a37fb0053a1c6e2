"""API route modules."""

from . import alexa, health

__all__ = ["health", "alexa"]
