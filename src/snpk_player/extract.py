"""Archive Extractor - unpack an embedded project into the working directory."""
from __future__ import annotations

import io
import lzma
import shutil
import tempfile
import threading
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from snpk_core.protocol import WORKDIR_NAME

from .const import ERRORS

# The working directory is a single shared slot; remove-then-recreate
# must never interleave between callers.
_EXTRACT_LOCK = threading.Lock()


class ExtractionError(Exception):
    def __init__(self, code: str, detail: str = "", entry: str | None = None):
        self.code = code
        self.entry = entry
        self.detail = detail
        msg = ERRORS[code]
        if entry is not None:
            msg += f" '{entry}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


def working_dir() -> Path:
    return Path(tempfile.gettempdir()) / WORKDIR_NAME


def _safe_target(root: Path, name: str) -> Path:
    """Map an archive entry name onto a path inside `root`."""
    rel = PurePosixPath(name.replace("\\", "/"))
    drive = rel.parts[0] if rel.parts else ""
    if rel.is_absolute() or ".." in rel.parts or (len(drive) == 2 and drive[1] == ":"):
        raise ExtractionError("E_UNSAFE_ENTRY", entry=name)
    target = root.joinpath(*rel.parts)
    if root != target and root not in target.parents:
        raise ExtractionError("E_UNSAFE_ENTRY", entry=name)
    return target


def _reset_dir(root: Path) -> None:
    try:
        if root.exists():
            shutil.rmtree(root)
        root.mkdir(parents=True)
    except OSError as e:
        raise ExtractionError("E_WORKDIR", detail=f"{root}: {e}") from e


def _extract_entries(archive: zipfile.ZipFile, root: Path) -> None:
    for info in archive.infolist():
        target = _safe_target(root, info.filename)
        try:
            if info.filename.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            with archive.open(info) as src, open(target, "wb") as dst:
                shutil.copyfileobj(src, dst)
        except (OSError, RuntimeError, ValueError, zipfile.BadZipFile, zlib.error, lzma.LZMAError, EOFError) as e:
            raise ExtractionError("E_ARCHIVE_ENTRY", detail=str(e), entry=info.filename) from e


def extract_game(zip_data: bytes, dest: Path | None = None) -> Path:
    """Replace `dest` (default: the fixed working directory) with the archive's contents.

    All-or-nothing from the caller's view: any failing entry raises
    ExtractionError and the caller must not trust the directory.
    """
    root = Path(dest) if dest is not None else working_dir()
    with _EXTRACT_LOCK:
        _reset_dir(root)
        root = root.resolve()
        try:
            archive = zipfile.ZipFile(io.BytesIO(zip_data))
        except (zipfile.BadZipFile, OSError, ValueError, lzma.LZMAError) as e:
            shutil.rmtree(root, ignore_errors=True)
            raise ExtractionError("E_ARCHIVE_FORMAT", detail=str(e)) from e
        try:
            with archive:
                _extract_entries(archive, root)
        except ExtractionError:
            # A half-extracted project must not be left behind.
            shutil.rmtree(root, ignore_errors=True)
            raise
    return root


def list_entries(zip_data: bytes) -> list[str]:
    """Entry names in archive order, without touching the filesystem."""
    try:
        with zipfile.ZipFile(io.BytesIO(zip_data)) as archive:
            return archive.namelist()
    except (zipfile.BadZipFile, OSError, ValueError, lzma.LZMAError) as e:
        raise ExtractionError("E_ARCHIVE_FORMAT", detail=str(e)) from e
