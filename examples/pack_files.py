"""Pack files from disk with FileBlob, then restore them into another directory."""

import asyncio
import tempfile
from collections.abc import Iterable
from pathlib import Path

from farc import ArchiveCodec, ArchiveConfig, ExtractedFile, ExtractionFailedError, blobs_from_paths, is_archive


def restore(files: Iterable[ExtractedFile], directory: Path) -> list[Path]:
    """Write each file into ``directory``, keeping only the final component of its name."""
    written: list[Path] = []
    for extracted in files:
        target = directory / Path(extracted.name).name
        target.write_bytes(extracted.data)
        written.append(target)
    return written


async def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        sources = root / "in"
        sources.mkdir()
        (sources / "notes.txt").write_text("remember the milk\n", encoding="utf-8")
        (sources / "pixel.png").write_bytes(b"\x89PNG\r\n\x1a\n")

        # A codec with a smaller ceiling; limits belong to the codec, not the process.
        codec = ArchiveCodec(ArchiveConfig(max_archive_size=10 * 1024 * 1024))
        result = await codec.pack(blobs_from_paths(sorted(sources.iterdir())))

        archive_path = root / result.metadata.suggested_filename
        archive_path.write_bytes(result.data)
        print(f"Wrote {archive_path.name} ({len(result.data)} bytes)")
        print(f"is_archive() = {is_archive(archive_path.read_bytes(), filename=archive_path.name)}")

        restored = root / "out"
        restored.mkdir()
        try:
            files = codec.unpack(archive_path.read_bytes())
        except ExtractionFailedError as exc:
            print(f"Extraction failed ({type(exc.cause).__name__}): {exc.cause}")
            return
        for extracted, target in zip(files, restore(files, restored), strict=True):
            print(f"Restored {target.name} ({extracted.size} bytes, {extracted.media_type})")


if __name__ == "__main__":
    asyncio.run(main())
