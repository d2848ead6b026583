"""FileBlob: BlobSource backed by a file on disk."""

from __future__ import annotations

import asyncio
import mimetypes
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileBlob:
    """Blob whose bytes are read lazily from ``path``.

    Size and modification time are captured when the FileBlob is built
    with :meth:`from_path`; the file is only read when pack awaits
    :meth:`read_bytes`.
    """

    path: Path
    name: str
    size: int
    media_type: str | None = None
    last_modified: int | None = None

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        name: str | None = None,
        media_type: str | None = None,
    ) -> FileBlob:
        """Stat ``path`` and guess its media type from the extension."""
        path = Path(path)
        stat = path.stat()
        if not path.is_file():
            msg = f"{path} is not a regular file."
            raise ValueError(msg)
        if media_type is None:
            media_type, _ = mimetypes.guess_type(str(path))
        return cls(
            path=path,
            name=name if name is not None else path.name,
            size=stat.st_size,
            media_type=media_type,
            last_modified=stat.st_mtime_ns // 1_000_000,
        )

    async def read_bytes(self) -> bytes:
        """Read the file contents without blocking the event loop."""
        return await asyncio.to_thread(self.path.read_bytes)
