"""Archive records: FileEntry, Manifest, ExtractedFile, PackResult, ArchiveSummary.

Wire field names follow the archive format (``size``, ``type``,
``lastModified``, ``dataOffset``, ``fileCount``, ``createdAt``); Python
attributes use snake_case. Timestamps are epoch milliseconds.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from farc.blobs import Blob
from farc.serde import (
    as_str_object_dict,
    object_list,
    optional_int,
    require_int,
    require_size,
    require_string,
)


@dataclass(frozen=True, slots=True)
class FileEntry:
    """Per-file header stored in the manifest and in front of each payload."""

    index: int
    name: str
    size: int
    media_type: str
    last_modified: int
    # character offset of this entry within the entries region; informational only
    data_offset: int = 0

    def to_dict(self) -> dict[str, object]:
        """Serialize FileEntry using archive wire names."""
        return {
            "index": self.index,
            "name": self.name,
            "size": self.size,
            "type": self.media_type,
            "lastModified": self.last_modified,
            "dataOffset": self.data_offset,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object], *, field_name: str = "FileEntry") -> FileEntry:
        """Deserialize FileEntry from archive wire names."""
        data_offset = optional_int(value.get("dataOffset"), field_name=f"{field_name}.dataOffset")
        return cls(
            index=require_int(value.get("index"), field_name=f"{field_name}.index"),
            name=require_string(value.get("name"), field_name=f"{field_name}.name"),
            size=require_size(value.get("size"), field_name=f"{field_name}.size"),
            media_type=require_string(value.get("type"), field_name=f"{field_name}.type"),
            last_modified=require_int(value.get("lastModified"), field_name=f"{field_name}.lastModified"),
            data_offset=data_offset if data_offset is not None else 0,
        )


@dataclass(frozen=True, slots=True)
class Manifest:
    """Archive header: format version and the ordered file entries."""

    format_version: int
    files: tuple[FileEntry, ...]
    created_at: int

    def __post_init__(self) -> None:
        """Normalize files container to tuple for runtime safety."""
        object.__setattr__(self, "files", tuple(self.files))

    @property
    def file_count(self) -> int:
        """Return the number of entries."""
        return len(self.files)

    def to_dict(self) -> dict[str, object]:
        """Serialize Manifest using archive wire names."""
        return {
            "version": self.format_version,
            "fileCount": self.file_count,
            "files": [entry.to_dict() for entry in self.files],
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object]) -> Manifest:
        """Deserialize Manifest; ``fileCount`` must agree with ``files``."""
        format_version = require_int(value.get("version"), field_name="Manifest.version")
        file_count = require_size(value.get("fileCount"), field_name="Manifest.fileCount")
        files = tuple(
            FileEntry.from_dict(
                as_str_object_dict(item, field_name=f"Manifest.files[{index}]"),
                field_name=f"Manifest.files[{index}]",
            )
            for index, item in enumerate(object_list(value.get("files"), field_name="Manifest.files"))
        )
        if len(files) != file_count:
            msg = f"Manifest.fileCount is {file_count} but {len(files)} file entries are listed."
            raise ValueError(msg)
        return cls(
            format_version=format_version,
            files=files,
            created_at=require_int(value.get("createdAt"), field_name="Manifest.createdAt"),
        )


@dataclass(frozen=True, slots=True)
class ExtractedFile:
    """One file reconstructed by unpack."""

    name: str
    size: int
    media_type: str
    last_modified: int
    data: bytes
    # index recorded in the entry header, not re-validated against position
    original_index: int

    def to_blob(self) -> Blob:
        """Return an in-memory Blob carrying the same name, bytes, and metadata."""
        return Blob(
            name=self.name,
            data=self.data,
            media_type=self.media_type,
            last_modified=self.last_modified,
        )


@dataclass(frozen=True, slots=True)
class PackMetadata:
    """Display metadata returned alongside packed archive bytes."""

    suggested_filename: str
    media_type: str
    timestamp: int
    file_count: int
    total_size: int
    file_names: tuple[str, ...]

    def __post_init__(self) -> None:
        """Normalize file_names container to tuple."""
        object.__setattr__(self, "file_names", tuple(self.file_names))


@dataclass(frozen=True, slots=True)
class PackResult:
    """Archive bytes plus their display metadata."""

    data: bytes
    metadata: PackMetadata


@dataclass(frozen=True, slots=True)
class FileSummary:
    """Manifest-level description of one file (no payload)."""

    name: str
    size: int
    media_type: str
    last_modified: int

    def to_dict(self) -> dict[str, object]:
        """Serialize FileSummary using archive wire names."""
        return {
            "name": self.name,
            "size": self.size,
            "type": self.media_type,
            "lastModified": self.last_modified,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object], *, field_name: str = "FileSummary") -> FileSummary:
        """Deserialize FileSummary from a manifest file record."""
        return cls(
            name=require_string(value.get("name"), field_name=f"{field_name}.name"),
            size=require_size(value.get("size"), field_name=f"{field_name}.size"),
            media_type=require_string(value.get("type"), field_name=f"{field_name}.type"),
            last_modified=require_int(value.get("lastModified"), field_name=f"{field_name}.lastModified"),
        )


@dataclass(frozen=True, slots=True)
class ArchiveSummary:
    """Result of describe: manifest contents without any payload decoding."""

    format_version: int
    file_count: int
    created_at: int | None
    files: tuple[FileSummary, ...]

    def __post_init__(self) -> None:
        """Normalize files container to tuple."""
        object.__setattr__(self, "files", tuple(self.files))

    @property
    def total_size(self) -> int:
        """Return the sum of all declared file sizes."""
        return sum(item.size for item in self.files)

    def to_dict(self) -> dict[str, object]:
        """Serialize ArchiveSummary to a plain dictionary."""
        return {
            "version": self.format_version,
            "fileCount": self.file_count,
            "createdAt": self.created_at,
            "files": [item.to_dict() for item in self.files],
            "totalSize": self.total_size,
        }
