"""Basic usage: pack two blobs, inspect the archive, and unpack it again."""

from farc import ArchiveCodec, Blob

codec = ArchiveCodec()

# pack_sync wraps the async pack() for scripts without an event loop.
result = codec.pack_sync(
    [
        Blob("a.txt", b"ABC", media_type="text/plain"),
        Blob("b.bin", b""),
    ]
)
print(f"Suggested filename: {result.metadata.suggested_filename}")
print(f"Archive bytes: {len(result.data)}, payload bytes: {result.metadata.total_size}")

# sniff is a cheap structural check; it never raises.
print(f"\nsniff() = {codec.sniff(result.data)}")
print(f"sniff(b'hello') = {codec.sniff(b'hello')}")

# describe reads only the manifest.
summary = codec.describe(result.data)
for item in summary.files:
    print(f"[manifest] {item.name} ({item.size} bytes, {item.media_type})")

# unpack decodes every payload, in the original order.
for extracted in codec.unpack(result.data):
    print(f"[unpacked #{extracted.original_index}] {extracted.name} = {extracted.data!r}")
