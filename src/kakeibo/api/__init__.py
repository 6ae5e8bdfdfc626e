"""HTTP API for kakeibo."""

from kakeibo.api.app import create_app

__all__ = ["create_app"]
