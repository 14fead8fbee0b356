"""High-level clients."""

from .web_client import Transport, WebClient

__all__ = ["WebClient", "Transport"]
