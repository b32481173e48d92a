"""
searchkeys keys module.

Models for creating, listing and updating API keys of the search service.
"""

from .models import (
    Action,
    Key,
    KeyBuilder,
    KeyFields,
    KeysQuery,
    KeysResults,
)

__all__ = [
    "Action",
    "Key",
    "KeyBuilder",
    "KeyFields",
    "KeysQuery",
    "KeysResults",
]
