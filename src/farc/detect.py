"""Heuristics for recognizing archives from metadata or content."""

from __future__ import annotations

from farc.codec import ArchiveCodec, BytesLike
from farc.config import DEFAULT_CONFIG, ArchiveConfig

_FILE_COUNT_KEY = '"fileCount"'


def is_archive(
    data: BytesLike,
    *,
    filename: str | None = None,
    media_type: str | None = None,
    config: ArchiveConfig | None = None,
) -> bool:
    """Return whether ``data`` should be treated as an archive.

    Filename extension and media type are trusted first; otherwise the
    content is probed with :meth:`ArchiveCodec.sniff`.
    """
    config = config if config is not None else DEFAULT_CONFIG
    if filename is not None and filename.endswith(config.archive_extension):
        return True
    if media_type is not None and media_type == config.archive_media_type:
        return True
    return ArchiveCodec(config).sniff(data)


def looks_like_archive(data: BytesLike, *, window: int = 1024, config: ArchiveConfig | None = None) -> bool:
    """Cheap textual probe over the first ``window`` bytes.

    A manifest longer than ``window`` bytes hides its separator, so this
    can return ``False`` for valid archives; use :func:`is_archive` when
    the whole buffer is at hand.
    """
    if window <= 0:
        msg = "window must be > 0."
        raise ValueError(msg)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        return False
    config = config if config is not None else DEFAULT_CONFIG
    head = bytes(data[:window]).decode("utf-8", errors="replace")
    marker = config.separator.strip() or config.separator
    return marker in head and _FILE_COUNT_KEY in head
