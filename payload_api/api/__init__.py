"""API route handlers."""

from .routes import SUPPORTED_VERSIONS, router

__all__ = ["SUPPORTED_VERSIONS", "router"]
