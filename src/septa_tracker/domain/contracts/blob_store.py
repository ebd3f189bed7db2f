"""Protocol for raw payload storage."""

from typing import Protocol


class BlobStoreProtocol(Protocol):
    """Protocol for a key/value store of raw payloads."""

    async def get(self, key: str) -> bytes | None:
        """Get the stored payload for a key.

        Args:
            key: The slot name.

        Returns:
            The stored bytes, or None if nothing was stored.
        """
        ...

    async def set(self, key: str, data: bytes) -> None:
        """Replace the payload stored under a key.

        Args:
            key: The slot name.
            data: The raw payload.
        """
        ...
