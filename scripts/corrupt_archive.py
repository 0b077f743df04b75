import sys
from pathlib import Path

from snpk_core.footer import locate_archive


def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_archive.py <player-binary>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    span = locate_archive(p)
    if span is None:
        print("No embedded archive found.")
        raise SystemExit(2)

    offset, size = span
    if size < 64:
        print("Archive too small to corrupt safely.")
        raise SystemExit(2)

    # Wreck the zip local header signature (first 4 bytes of the archive)
    # and the end-of-central-directory signature, so no reader can open it.
    b = bytearray(p.read_bytes())
    eocd = b.rfind(b"PK\x05\x06", offset, offset + size)
    targets = [offset] + ([eocd] if eocd != -1 else [])
    for idx in targets:
        b[idx] ^= 0xFF
    p.write_bytes(bytes(b))
    print(f"Corrupted archive at offsets {targets} in {p}")

if __name__ == "__main__":
    main()
