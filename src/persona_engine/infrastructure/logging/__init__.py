"""
Logging setup shared by the CLI and the API.
"""

from .setup import configure_logging

__all__ = ["configure_logging"]
