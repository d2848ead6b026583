"""Blob: in-memory BlobSource."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Blob:
    """Immutable in-memory blob with its metadata."""

    name: str
    data: bytes
    media_type: str | None = None
    last_modified: int | None = None

    def __post_init__(self) -> None:
        """Validate field types and normalize buffer-like data to bytes."""
        if not isinstance(self.name, str):
            msg = "Blob.name must be a string."
            raise TypeError(msg)
        if isinstance(self.data, (bytearray, memoryview)):
            object.__setattr__(self, "data", bytes(self.data))
        elif not isinstance(self.data, bytes):
            msg = "Blob.data must be bytes-like."
            raise TypeError(msg)
        if self.media_type is not None and not isinstance(self.media_type, str):
            msg = "Blob.media_type must be a string or None."
            raise TypeError(msg)
        if self.last_modified is not None and (
            not isinstance(self.last_modified, int) or isinstance(self.last_modified, bool)
        ):
            msg = "Blob.last_modified must be an int or None."
            raise TypeError(msg)

    @property
    def size(self) -> int:
        """Return the byte length of ``data``."""
        return len(self.data)

    async def read_bytes(self) -> bytes:
        """Return the stored bytes."""
        return self.data
