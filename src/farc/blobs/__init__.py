"""Blob sources: the inputs pack reads bytes from."""

from farc.blobs._file import FileBlob
from farc.blobs._helpers import blob_from_file, blobs_from_paths
from farc.blobs._memory import Blob
from farc.blobs._source import BlobSource, now_millis, to_epoch_millis

__all__ = [
    "Blob",
    "BlobSource",
    "FileBlob",
    "blob_from_file",
    "blobs_from_paths",
    "now_millis",
    "to_epoch_millis",
]
