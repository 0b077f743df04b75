"""Footer Reader - locate the archive appended to a player binary."""
from __future__ import annotations

import os
import struct
from pathlib import Path

from snpk_core.protocol import MAGIC, TRAILER_FMT, TRAILER_LEN


def decode_trailer(trailer: bytes) -> int | None:
    """Decode a 12-byte trailer into the archive size, or None if it is not one."""
    if len(trailer) != TRAILER_LEN:
        return None
    archive_size, magic = struct.unpack(TRAILER_FMT, trailer)
    if magic != MAGIC:
        return None
    return int(archive_size)


def encode_trailer(archive_size: int) -> bytes:
    return struct.pack(TRAILER_FMT, archive_size, MAGIC)


def read_footer(path: Path | str) -> int | None:
    """Read the trailer at the end of `path`.

    Missing files, permission errors, short files and bad magic all collapse
    to None: from the caller's side they all mean "no embedded data".
    """
    try:
        with open(path, "rb") as f:
            f.seek(0, os.SEEK_END)
            if f.tell() < TRAILER_LEN:
                return None
            f.seek(-TRAILER_LEN, os.SEEK_END)
            trailer = f.read(TRAILER_LEN)
    except OSError:
        return None
    return decode_trailer(trailer)


def locate_archive(path: Path | str) -> tuple[int, int] | None:
    """Return (offset, size) of the embedded archive, bounds-checked against the file."""
    archive_size = read_footer(path)
    if archive_size is None:
        return None
    try:
        file_len = os.path.getsize(path)
    except OSError:
        return None
    # The size field is untrusted until it fits inside the file.
    if TRAILER_LEN + archive_size > file_len:
        return None
    return file_len - TRAILER_LEN - archive_size, archive_size


def read_embedded_archive(path: Path | str) -> bytes | None:
    """Return the bytes in [len-12-N, len-12), or None when there are none."""
    span = locate_archive(path)
    if span is None:
        return None
    offset, size = span
    try:
        with open(path, "rb") as f:
            f.seek(offset)
            data = f.read(size)
    except OSError:
        return None
    if len(data) != size:
        return None
    return data
