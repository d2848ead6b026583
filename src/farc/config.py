"""ArchiveConfig: per-codec format constants and size policy."""

import string
from collections.abc import Mapping
from dataclasses import dataclass

from farc.errors import ArchiveTooLargeError
from farc.serde import require_float, require_int, require_string

DEFAULT_SEPARATOR = "\n---FILE-SEPARATOR---\n"
DEFAULT_MAX_ARCHIVE_SIZE = 200 * 1024 * 1024
DEFAULT_SIZE_EXPANSION_FACTOR = 1.4
DEFAULT_MEDIA_TYPE = "application/octet-stream"
ARCHIVE_MEDIA_TYPE = "application/x-file-archive"
ARCHIVE_EXTENSION = ".farc"

_BASE64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/=")


@dataclass(frozen=True, slots=True)
class ArchiveConfig:
    """Format constants and limits owned by one ArchiveCodec.

    The separator must start with a raw newline (compact JSON and RFC 4648
    base64 never emit one) followed by a character that is neither a newline
    nor base64 output. The only other newline in an entry is the
    header/payload break, which is followed by base64 or by the separator
    itself, so no match can start before the real separator.
    """

    format_version: int = 1
    separator: str = DEFAULT_SEPARATOR
    max_archive_size: int = DEFAULT_MAX_ARCHIVE_SIZE
    # base64 grows payloads by ~33%; the rest covers headers and manifest
    size_expansion_factor: float = DEFAULT_SIZE_EXPANSION_FACTOR
    default_media_type: str = DEFAULT_MEDIA_TYPE
    archive_media_type: str = ARCHIVE_MEDIA_TYPE
    archive_extension: str = ARCHIVE_EXTENSION

    def __post_init__(self) -> None:
        """Reject configurations that would produce unreadable archives."""
        if self.format_version < 1:
            msg = "format_version must be >= 1."
            raise ValueError(msg)
        separator = self.separator
        if len(separator) < 2 or separator[0] != "\n" or separator[1] == "\n" or separator[1] in _BASE64_ALPHABET:
            msg = "separator must start with a newline followed by a character outside the base64 alphabet."
            raise ValueError(msg)
        if self.max_archive_size <= 0:
            msg = "max_archive_size must be > 0."
            raise ValueError(msg)
        if self.size_expansion_factor < 1:
            msg = "size_expansion_factor must be >= 1."
            raise ValueError(msg)
        if not self.archive_extension.startswith("."):
            msg = "archive_extension must start with '.'."
            raise ValueError(msg)

    def estimate_archive_size(self, total_size: int) -> float:
        """Project the archive size for ``total_size`` bytes of raw payload."""
        return total_size * self.size_expansion_factor

    def check_size(self, total_size: int) -> None:
        """Raise ArchiveTooLargeError when the projected size exceeds the ceiling."""
        estimated = self.estimate_archive_size(total_size)
        if estimated > self.max_archive_size:
            raise ArchiveTooLargeError(total_size, estimated, self.max_archive_size)

    def suggested_filename(self, file_count: int) -> str:
        """Return the display filename for an archive of ``file_count`` files."""
        return f"archive_{file_count}_files{self.archive_extension}"

    def to_dict(self) -> dict[str, object]:
        """Serialize ArchiveConfig to a plain dictionary."""
        return {
            "format_version": self.format_version,
            "separator": self.separator,
            "max_archive_size": self.max_archive_size,
            "size_expansion_factor": self.size_expansion_factor,
            "default_media_type": self.default_media_type,
            "archive_media_type": self.archive_media_type,
            "archive_extension": self.archive_extension,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object]) -> "ArchiveConfig":
        """Deserialize ArchiveConfig; missing keys keep their defaults."""
        kwargs: dict[str, object] = {}
        if "format_version" in value:
            kwargs["format_version"] = require_int(value["format_version"], field_name="ArchiveConfig.format_version")
        if "max_archive_size" in value:
            kwargs["max_archive_size"] = require_int(
                value["max_archive_size"],
                field_name="ArchiveConfig.max_archive_size",
            )
        if "size_expansion_factor" in value:
            kwargs["size_expansion_factor"] = require_float(
                value["size_expansion_factor"],
                field_name="ArchiveConfig.size_expansion_factor",
            )
        for key in ("separator", "default_media_type", "archive_media_type", "archive_extension"):
            if key in value:
                kwargs[key] = require_string(value[key], field_name=f"ArchiveConfig.{key}")
        return cls(**kwargs)  # type: ignore[arg-type]


DEFAULT_CONFIG = ArchiveConfig()
