import io
import json
import zipfile
from pathlib import Path

import pytest

from snpk_core.footer import encode_trailer

STUB = b"\x7fELF-not-really-a-player\x00" * 8

DEMO_MANIFEST = {
    "name": "Demo",
    "stages": [],
    "gameSettings": {"title": "Demo Game", "windowWidth": 800, "windowHeight": 600},
}


def make_zip(files: dict[str, bytes | str], dirs: tuple[str, ...] = ()) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for d in dirs:
            zf.writestr(d if d.endswith("/") else d + "/", b"")
        for name, content in files.items():
            zf.writestr(name, content)
    return buf.getvalue()


def make_corrupt_lzma_zip() -> bytes:
    """LZMA entry whose compressed payload has been scrambled."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_LZMA) as zf:
        zf.writestr("project.json", json.dumps(list(range(2000))))
    data = bytearray(buf.getvalue())
    start = 30 + len("project.json")
    for i in range(start + 10, start + 50):
        data[i] ^= 0xFF
    return bytes(data)


def make_bad_name_zip() -> bytes:
    """UTF-8 flagged entry whose local header name is not valid UTF-8."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        zf.writestr("men\u00fc.json", "{}")
    data = bytearray(buf.getvalue())
    # Central directory keeps the good name; only the local copy is broken.
    data[30] = 0xFF
    return bytes(data)


def make_player(path: Path, zip_data: bytes | None, stub: bytes = STUB) -> Path:
    """Write stub + archive + trailer, the way a packaged player is laid out."""
    blob = stub
    if zip_data is not None:
        blob += zip_data + encode_trailer(len(zip_data))
    path.write_bytes(blob)
    return path


@pytest.fixture
def demo_zip() -> bytes:
    return make_zip(
        {
            "project.json": json.dumps(DEMO_MANIFEST),
            "stage-1/stage.json": "{}",
            "resources/images/bg.png": b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4,
        },
        dirs=("stage-1/", "resources/", "resources/images/"),
    )


@pytest.fixture
def work_dir(tmp_path) -> Path:
    return tmp_path / "work"
