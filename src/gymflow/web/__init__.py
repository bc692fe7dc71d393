"""HTTP API for gymflow."""

from .app import create_app

__all__ = ["create_app"]
