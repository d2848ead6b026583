"""ArchiveCodec: pack blobs into a single text-framed archive and read it back.

Layout (UTF-8 text)::

    <manifest-json> SEP <entry-0> SEP <entry-1> SEP ... <entry-(n-1)> SEP
    entry-i := <file-entry-json> "\\n" <base64(payload-i)>

The trailing separator after the last entry is optional on read.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, cast

from farc.blobs import now_millis
from farc.config import DEFAULT_CONFIG, ArchiveConfig
from farc.errors import (
    ArchiveFormatError,
    DescribeFailedError,
    EmptyInputError,
    ExtractionFailedError,
    FarcError,
    MalformedArchiveError,
    MalformedFileEntryError,
    TruncatedArchiveError,
    UnsupportedVersionError,
)
from farc.serde import as_str_object_dict, optional_int
from farc.transcode import decode_payload, encode_payload
from farc.types import (
    ArchiveSummary,
    ExtractedFile,
    FileEntry,
    FileSummary,
    Manifest,
    PackMetadata,
    PackResult,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from farc.blobs import BlobSource

logger = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview


def _as_bytes(data: BytesLike) -> bytes:
    """Normalize a bytes-like archive buffer."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    msg = f"Archive data must be bytes-like, got {type(data).__name__}."
    raise TypeError(msg)


def _dump_json(value: dict[str, object]) -> str:
    """Serialize to compact single-line JSON (non-ASCII escaped, so encoding is lossless)."""
    return json.dumps(value, separators=(",", ":"))


class ArchiveCodec:
    """Encoder/decoder for one archive configuration.

    Instances hold no per-call state; every operation works on local data
    only, so one codec can serve any number of independent calls.
    """

    def __init__(self, config: ArchiveConfig | None = None) -> None:
        """Initialize with a configuration (defaults to the standard format)."""
        self._config = config if config is not None else DEFAULT_CONFIG

    @property
    def config(self) -> ArchiveConfig:
        """Return the codec configuration."""
        return self._config

    # --- Writing ---

    async def pack(self, blobs: Iterable[BlobSource]) -> PackResult:
        """Build an archive from ``blobs`` in order.

        Size policy is checked against the declared sizes before any bytes
        are read. Each source is then awaited one at a time so entry
        offsets and manifest order follow the input order.

        Raises:
            EmptyInputError: ``blobs`` is empty.
            ArchiveTooLargeError: the projected archive size exceeds the ceiling.
        """
        config = self._config
        sources = tuple(blobs)
        if not sources:
            raise EmptyInputError
        config.check_size(sum(source.size for source in sources))

        entries: list[FileEntry] = []
        chunks: list[str] = []
        offset = 0
        total_size = 0
        for index, source in enumerate(sources):
            data = await source.read_bytes()
            if not isinstance(data, bytes):
                data = bytes(data)
            if len(data) != source.size:
                logger.warning(
                    "Blob %r declared %d bytes but %d were read; recording actual size.",
                    source.name,
                    source.size,
                    len(data),
                )

            entry = FileEntry(
                index=index,
                name=source.name,
                size=len(data),
                media_type=source.media_type if source.media_type is not None else config.default_media_type,
                last_modified=source.last_modified if source.last_modified is not None else now_millis(),
                data_offset=offset,
            )
            chunk = f"{_dump_json(entry.to_dict())}\n{encode_payload(data)}{config.separator}"
            entries.append(entry)
            chunks.append(chunk)
            offset += len(chunk)
            total_size += len(data)
            logger.debug("Packed entry %d (%r, %d bytes)", index, entry.name, entry.size)

        manifest = Manifest(format_version=config.format_version, files=tuple(entries), created_at=now_millis())
        text = f"{_dump_json(manifest.to_dict())}{config.separator}{''.join(chunks)}"
        archive = text.encode("utf-8")
        logger.debug(
            "Built archive with %d files (%d payload bytes, %d archive bytes)",
            len(entries),
            total_size,
            len(archive),
        )

        return PackResult(
            data=archive,
            metadata=PackMetadata(
                suggested_filename=config.suggested_filename(len(entries)),
                media_type=config.archive_media_type,
                timestamp=now_millis(),
                file_count=len(entries),
                total_size=total_size,
                file_names=tuple(entry.name for entry in entries),
            ),
        )

    def pack_sync(self, blobs: Iterable[BlobSource]) -> PackResult:
        """Run :meth:`pack` to completion for callers without an event loop."""
        return asyncio.run(self.pack(blobs))

    # --- Reading ---

    def unpack(self, data: BytesLike) -> tuple[ExtractedFile, ...]:
        """Reconstruct every file in the archive, in entry order.

        Raises:
            ExtractionFailedError: wraps the ArchiveFormatError that stopped
                extraction. No partial result is returned.
        """
        try:
            return self._unpack(_as_bytes(data))
        except ArchiveFormatError as exc:
            raise ExtractionFailedError(exc) from exc

    def sniff(self, data: BytesLike) -> bool:
        """Return whether ``data`` has a readable manifest for this format version.

        Only the framing and manifest shape are checked; entries and payloads
        are not.
        """
        try:
            parts = self._split(_as_bytes(data))
            manifest = json.loads(parts[0])
        except (FarcError, ValueError, TypeError, RecursionError):
            return False
        if not isinstance(manifest, dict):
            return False
        file_count = manifest.get("fileCount")
        return (
            self._is_supported_version(manifest.get("version"))
            and isinstance(file_count, int)
            and not isinstance(file_count, bool)
            and isinstance(manifest.get("files"), list)
        )

    def describe(self, data: BytesLike) -> ArchiveSummary:
        """Read the manifest without touching any payload.

        Raises:
            DescribeFailedError: wraps the ArchiveFormatError raised while
                parsing the manifest.
        """
        try:
            parts = self._split(_as_bytes(data))
            manifest = self._load_manifest(parts[0])
            summary = self._summarize(manifest)
        except ArchiveFormatError as exc:
            raise DescribeFailedError(exc) from exc
        logger.debug("Described archive with %d files (%d bytes)", summary.file_count, summary.total_size)
        return summary

    # --- Internals ---

    def _is_supported_version(self, version: object) -> bool:
        return isinstance(version, int) and not isinstance(version, bool) and version == self._config.format_version

    def _split(self, data: bytes) -> list[str]:
        """Decode and split into manifest + entry parts."""
        text = data.decode("utf-8", errors="replace")
        parts = text.split(self._config.separator)
        if len(parts) < 2:
            msg = "separator not found"
            raise MalformedArchiveError(msg)
        return parts

    def _load_manifest(self, text: str) -> dict[str, object]:
        """Parse the manifest part and validate version, fileCount, and files."""
        try:
            raw = json.loads(text)
        except (ValueError, RecursionError) as exc:
            msg = f"manifest is not valid JSON ({exc})"
            raise MalformedArchiveError(msg) from exc
        if not isinstance(raw, dict):
            msg = "manifest must be a JSON object"
            raise MalformedArchiveError(msg)

        version = raw.get("version")
        if not self._is_supported_version(version):
            raise UnsupportedVersionError(version, self._config.format_version)

        file_count = raw.get("fileCount")
        if not isinstance(file_count, int) or isinstance(file_count, bool) or file_count < 1:
            msg = "manifest fileCount must be a positive integer"
            raise MalformedArchiveError(msg)
        if not isinstance(raw.get("files"), list):
            msg = "manifest files must be an array"
            raise MalformedArchiveError(msg)
        return raw

    def _unpack(self, data: bytes) -> tuple[ExtractedFile, ...]:
        parts = self._split(data)
        manifest = self._load_manifest(parts[0])
        file_count = cast("int", manifest["fileCount"])

        entry_parts = parts[1:]
        # text after the final separator is empty for a complete archive
        if entry_parts and not entry_parts[-1]:
            entry_parts.pop()

        files: list[ExtractedFile] = []
        for index in range(file_count):
            if index >= len(entry_parts):
                raise TruncatedArchiveError(index)
            header, newline, payload_text = entry_parts[index].partition("\n")
            if not newline:
                raise MalformedFileEntryError(index, "missing line break between header and payload")

            try:
                entry = FileEntry.from_dict(
                    as_str_object_dict(json.loads(header), field_name="header"),
                    field_name="header",
                )
            except (ValueError, TypeError, RecursionError) as exc:
                raise MalformedFileEntryError(index, str(exc)) from exc

            payload = decode_payload(payload_text, index=index)
            if len(payload) != entry.size:
                raise MalformedFileEntryError(
                    index,
                    f"header declares {entry.size} bytes but payload decodes to {len(payload)}",
                )

            files.append(
                ExtractedFile(
                    name=entry.name,
                    size=entry.size,
                    media_type=entry.media_type,
                    last_modified=entry.last_modified,
                    data=payload,
                    original_index=entry.index,
                )
            )
            logger.debug("Extracted entry %d (%r, %d bytes)", index, entry.name, entry.size)

        return tuple(files)

    def _summarize(self, manifest: dict[str, object]) -> ArchiveSummary:
        """Build an ArchiveSummary from an already validated manifest."""
        file_count = cast("int", manifest["fileCount"])
        files_value = cast("list[object]", manifest["files"])
        try:
            files = tuple(
                FileSummary.from_dict(
                    as_str_object_dict(item, field_name=f"files[{index}]"),
                    field_name=f"files[{index}]",
                )
                for index, item in enumerate(files_value)
            )
            created_at = optional_int(manifest.get("createdAt"), field_name="createdAt")
        except (ValueError, TypeError) as exc:
            msg = f"manifest {exc}"
            raise MalformedArchiveError(msg) from exc
        return ArchiveSummary(
            format_version=self._config.format_version,
            file_count=file_count,
            created_at=created_at,
            files=files,
        )


_DEFAULT_CODEC = ArchiveCodec()


async def pack(blobs: Iterable[BlobSource]) -> PackResult:
    """Pack ``blobs`` with the default configuration."""
    return await _DEFAULT_CODEC.pack(blobs)


def pack_sync(blobs: Iterable[BlobSource]) -> PackResult:
    """Pack ``blobs`` with the default configuration, synchronously."""
    return _DEFAULT_CODEC.pack_sync(blobs)


def unpack(data: BytesLike) -> tuple[ExtractedFile, ...]:
    """Unpack ``data`` with the default configuration."""
    return _DEFAULT_CODEC.unpack(data)


def sniff(data: BytesLike) -> bool:
    """Probe ``data`` with the default configuration."""
    return _DEFAULT_CODEC.sniff(data)


def describe(data: BytesLike) -> ArchiveSummary:
    """Describe ``data`` with the default configuration."""
    return _DEFAULT_CODEC.describe(data)
