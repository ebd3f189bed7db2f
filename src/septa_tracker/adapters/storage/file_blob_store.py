"""File-backed blob store."""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path

from septa_tracker.domain.contracts.blob_store import BlobStoreProtocol

logger = logging.getLogger(__name__)


class FileBlobStore(BlobStoreProtocol):
    """Stores each key as one file inside a directory.

    File I/O runs in a worker thread so the event loop is never blocked.
    Writes go to a temporary file that is then renamed over the target.
    """

    def __init__(self, directory: Path) -> None:
        """Initialize the store.

        Args:
            directory: Directory for stored payloads; created on first write.
        """
        self.directory = directory

    def _path_for(self, key: str) -> Path:
        if not key or Path(key).name != key:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / key

    def _read(self, path: Path) -> bytes | None:
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None

    def _write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def get(self, key: str) -> bytes | None:
        """Get the stored payload for a key.

        Args:
            key: File name inside the store directory.

        Returns:
            The stored bytes, or None if the file does not exist.
        """
        path = self._path_for(key)
        return await asyncio.to_thread(self._read, path)

    async def set(self, key: str, data: bytes) -> None:
        """Replace the payload stored under a key.

        Args:
            key: File name inside the store directory.
            data: The raw payload.
        """
        path = self._path_for(key)
        await asyncio.to_thread(self._write, path, data)
        logger.debug(f"Stored {len(data)} bytes in {path}")
