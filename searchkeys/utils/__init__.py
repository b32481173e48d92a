"""
searchkeys utilities: HTTP transport and logging setup.
"""

from .http import SearchHttpClient
from .logging import setup_logging

__all__ = [
    "SearchHttpClient",
    "setup_logging",
]
