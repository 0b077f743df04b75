"""Runtime Configurator - startup window config and the game data query.

Startup resolution is a straight sequence of stages. Each stage either hands
its result to the next one or the whole thing settles on built-in defaults:

    footer absent        -> defaults
    extraction failed    -> defaults (warned, never raised)
    no usable settings   -> defaults
    settings found       -> per-field defaults over the manifest values

The query path (`get_game_data_path`) walks the same footer/extract stages
but must report failure, since there is no safe default project root.
"""
from __future__ import annotations

import os
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from warnings import warn

from snpk_core.footer import read_embedded_archive
from snpk_core.manifest import GameSettings, read_game_settings
from snpk_core.protocol import (
    DEFAULT_FULLSCREEN,
    DEFAULT_RESIZABLE,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MANIFEST_NAME,
    PRODUCT_NAME,
)

from .const import ERRORS
from .extract import ExtractionError, extract_game


class GameDataError(Exception):
    def __init__(self, code: str = "E_NO_GAME_DATA"):
        self.code = code
        super().__init__(ERRORS[code])


@dataclass(frozen=True)
class WindowConfig:
    title: str = PRODUCT_NAME
    width: int = DEFAULT_WINDOW_WIDTH
    height: int = DEFAULT_WINDOW_HEIGHT
    resizable: bool = DEFAULT_RESIZABLE
    fullscreen: bool = DEFAULT_FULLSCREEN
    default_theme_id: str | None = None
    default_game_mode: str | None = None
    game_dir: str | None = None

    @classmethod
    def from_settings(cls, settings: GameSettings, game_dir: str | None = None) -> "WindowConfig":
        """Each missing field falls back on its own default."""
        return cls(
            title=settings.title if settings.title is not None else PRODUCT_NAME,
            width=settings.window_width if settings.window_width is not None else DEFAULT_WINDOW_WIDTH,
            height=settings.window_height if settings.window_height is not None else DEFAULT_WINDOW_HEIGHT,
            resizable=settings.resizable if settings.resizable is not None else DEFAULT_RESIZABLE,
            fullscreen=settings.fullscreen if settings.fullscreen is not None else DEFAULT_FULLSCREEN,
            default_theme_id=settings.default_theme_id,
            default_game_mode=settings.default_game_mode,
            game_dir=game_dir,
        )

    def to_dict(self) -> dict:
        return asdict(self)


def current_exe() -> Path:
    return Path(sys.executable).resolve()


def resolve_startup_config(exe_path: Path | None = None, work_dir: Path | None = None) -> WindowConfig:
    """One-shot, best-effort startup resolution. Never raises."""
    exe = Path(exe_path) if exe_path is not None else current_exe()

    zip_data = read_embedded_archive(exe)
    if zip_data is None:
        return WindowConfig()

    try:
        game_dir = extract_game(zip_data, work_dir)
    except ExtractionError as e:
        warn(f"Embedded game data could not be extracted, using defaults: {e}")
        return WindowConfig()

    settings = read_game_settings(game_dir)
    if settings is None:
        return WindowConfig(game_dir=str(game_dir))

    return WindowConfig.from_settings(settings, game_dir=str(game_dir))


def get_game_data_path(
    exe_path: Path | None = None,
    work_dir: Path | None = None,
    cwd: Path | None = None,
) -> str:
    """Absolute path of the project root the UI should load from.

    Embedded data wins and is re-extracted on every call. Without it, the
    current directory is used if it holds a manifest. Raises ExtractionError
    when embedded data is broken and GameDataError when there is none.
    """
    exe = Path(exe_path) if exe_path is not None else current_exe()

    zip_data = read_embedded_archive(exe)
    if zip_data is not None:
        return str(extract_game(zip_data, work_dir))

    if cwd is not None:
        here = Path(cwd)
    else:
        try:
            here = Path(os.getcwd())
        except OSError as e:
            # The process directory was removed out from under us.
            raise GameDataError() from e
    if (here / MANIFEST_NAME).exists():
        return str(here.resolve())

    raise GameDataError()
