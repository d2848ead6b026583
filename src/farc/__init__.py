"""farc: pack named binary blobs into a single self-describing archive."""

import importlib.metadata as importlib_metadata

from farc.blobs import Blob, BlobSource, FileBlob, blob_from_file, blobs_from_paths
from farc.codec import ArchiveCodec, describe, pack, pack_sync, sniff, unpack
from farc.config import ArchiveConfig
from farc.detect import is_archive, looks_like_archive
from farc.errors import (
    ArchiveFormatError,
    ArchiveTooLargeError,
    DescribeFailedError,
    EmptyInputError,
    ExtractionFailedError,
    FarcError,
    InvalidEncodingError,
    MalformedArchiveError,
    MalformedFileEntryError,
    PackError,
    TruncatedArchiveError,
    UnsupportedVersionError,
)
from farc.types import (
    ArchiveSummary,
    ExtractedFile,
    FileEntry,
    FileSummary,
    Manifest,
    PackMetadata,
    PackResult,
)


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("farc")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "ArchiveCodec",
    "ArchiveConfig",
    "ArchiveFormatError",
    "ArchiveSummary",
    "ArchiveTooLargeError",
    "Blob",
    "BlobSource",
    "DescribeFailedError",
    "EmptyInputError",
    "ExtractedFile",
    "ExtractionFailedError",
    "FarcError",
    "FileBlob",
    "FileEntry",
    "FileSummary",
    "InvalidEncodingError",
    "MalformedArchiveError",
    "MalformedFileEntryError",
    "Manifest",
    "PackError",
    "PackMetadata",
    "PackResult",
    "TruncatedArchiveError",
    "UnsupportedVersionError",
    "blob_from_file",
    "blobs_from_paths",
    "describe",
    "is_archive",
    "looks_like_archive",
    "pack",
    "pack_sync",
    "sniff",
    "unpack",
]
