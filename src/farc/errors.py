"""Typed errors for farc."""


class FarcError(Exception):
    """Base exception for all farc errors."""


class PackError(FarcError):
    """Raised when an archive cannot be built from the given blobs."""


class EmptyInputError(PackError):
    """Raised when pack is called without any blobs."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("No files provided for archiving.")


class ArchiveTooLargeError(PackError):
    """Raised when the projected archive size exceeds the configured ceiling."""

    def __init__(self, actual_size: int, estimated_size: float, limit: int) -> None:
        """Initialize with the raw total, its projected archive size, and the ceiling."""
        self.actual_size = actual_size
        self.estimated_size = estimated_size
        self.limit = limit
        super().__init__(
            f"Combined file size too large: {actual_size} bytes "
            f"(estimated archive size {estimated_size:.0f} bytes, limit {limit} bytes)."
        )


class ArchiveFormatError(FarcError):
    """Base class for structural problems found while reading an archive."""


class MalformedArchiveError(ArchiveFormatError):
    """Raised when the archive framing or manifest cannot be parsed."""

    def __init__(self, reason: str) -> None:
        """Initialize with a human-readable reason."""
        self.reason = reason
        super().__init__(f"Invalid archive format: {reason}")


class UnsupportedVersionError(ArchiveFormatError):
    """Raised when the manifest declares a format version this codec does not read."""

    def __init__(self, found: object, supported: int) -> None:
        """Initialize with the encountered and supported versions."""
        self.found = found
        self.supported = supported
        super().__init__(f"Unsupported archive version: {found!r} (supported: {supported})")


class TruncatedArchiveError(ArchiveFormatError):
    """Raised when the archive ends before all manifest entries were read."""

    def __init__(self, missing_index: int) -> None:
        """Initialize with the index of the first missing entry."""
        self.missing_index = missing_index
        super().__init__(f"Missing file data for file {missing_index}")


class MalformedFileEntryError(ArchiveFormatError):
    """Raised when a per-file header cannot be parsed or disagrees with its payload."""

    def __init__(self, index: int, reason: str) -> None:
        """Initialize with the entry position and a reason."""
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid file format for file {index}: {reason}")


class InvalidEncodingError(ArchiveFormatError):
    """Raised when a file payload is not valid base64."""

    def __init__(self, index: int) -> None:
        """Initialize with the entry position."""
        self.index = index
        super().__init__(f"Invalid Base64 payload for file {index}")


class ExtractionFailedError(FarcError):
    """Raised by unpack; wraps the specific ArchiveFormatError in ``cause``."""

    def __init__(self, cause: ArchiveFormatError) -> None:
        """Initialize with the root cause."""
        self.cause = cause
        super().__init__(f"Failed to extract archive: {cause}")


class DescribeFailedError(FarcError):
    """Raised by describe; wraps the specific ArchiveFormatError in ``cause``."""

    def __init__(self, cause: ArchiveFormatError) -> None:
        """Initialize with the root cause."""
        self.cause = cause
        super().__init__(f"Failed to read archive info: {cause}")
