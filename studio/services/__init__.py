"""
Services package initializer.

Re-exports the service classes so callers can import from
`studio.services` instead of deep module paths.
"""

from .albums import AlbumService, AlbumDeletion
from .storage import LocalStorage, LocalStorageError

__all__ = [
    "AlbumService",
    "AlbumDeletion",
    "LocalStorage",
    "LocalStorageError",
]
