"""BlobSource: protocol for anything pack can read bytes from."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


def utc_now() -> datetime:
    """Return the current timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime into integer epoch milliseconds (naive values are UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def now_millis() -> int:
    """Return the current time as integer epoch milliseconds."""
    return to_epoch_millis(utc_now())


@runtime_checkable
class BlobSource(Protocol):
    """Named binary input with metadata.

    ``size`` is the declared length used for size-limit checks before any
    bytes are read. ``media_type`` and ``last_modified`` may be ``None``;
    pack then substitutes the configured default media type and the
    current time.
    """

    @property
    def name(self) -> str:
        """Return the file name (not required to be unique)."""
        ...

    @property
    def size(self) -> int:
        """Return the declared byte length."""
        ...

    @property
    def media_type(self) -> str | None:
        """Return the MIME type, if known."""
        ...

    @property
    def last_modified(self) -> int | None:
        """Return the modification time in epoch milliseconds, if known."""
        ...

    async def read_bytes(self) -> bytes:
        """Return the raw bytes."""
        ...
