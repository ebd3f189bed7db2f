"""Local persistence adapters."""

from septa_tracker.adapters.storage.favorites_store import BlobFavoritesRepository
from septa_tracker.adapters.storage.file_blob_store import FileBlobStore

__all__ = ["BlobFavoritesRepository", "FileBlobStore"]
