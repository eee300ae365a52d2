"""HTTP surface: streamed translation, model list and health endpoints."""

from codeshift.web.server import create_app

__all__ = ["create_app"]
