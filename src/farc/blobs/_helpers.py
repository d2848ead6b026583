"""Helper functions for building blob sources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from farc.blobs._file import FileBlob

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


def blob_from_file(path: str | Path, *, name: str | None = None) -> FileBlob:
    """Build a FileBlob for ``path``, guessing media_type from the extension."""
    return FileBlob.from_path(path, name=name)


def blobs_from_paths(paths: Iterable[str | Path]) -> tuple[FileBlob, ...]:
    """Build FileBlobs for ``paths`` in the given order.

    Duplicate names are kept; archives do not require unique names.
    """
    return tuple(blob_from_file(path) for path in paths)
