"""Project manifest types and the best-effort settings resolver."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
from warnings import warn

from snpk_core.protocol import MANIFEST_NAME, MAX_DIMENSION


class ManifestError(ValueError):
    """project.json does not match the expected shape."""


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ManifestError(f"{key} must be a string, got {type(value).__name__}")


def _opt_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ManifestError(f"{key} must be a boolean, got {type(value).__name__}")


def _opt_dimension(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass; JSON true is not a width.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ManifestError(f"{key} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_DIMENSION:
        raise ManifestError(f"{key} out of range: {value}")
    return value


@dataclass(frozen=True)
class GameSettings:
    """The optional `gameSettings` block. Every field may be absent."""

    title: str | None = None
    window_width: int | None = None
    window_height: int | None = None
    resizable: bool | None = None
    fullscreen: bool | None = None
    default_theme_id: str | None = None
    default_game_mode: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "GameSettings":
        if not isinstance(data, dict):
            raise ManifestError("gameSettings must be an object")
        return cls(
            title=_opt_str(data, "title"),
            window_width=_opt_dimension(data, "windowWidth"),
            window_height=_opt_dimension(data, "windowHeight"),
            resizable=_opt_bool(data, "resizable"),
            fullscreen=_opt_bool(data, "fullscreen"),
            default_theme_id=_opt_str(data, "defaultThemeId"),
            default_game_mode=_opt_str(data, "defaultGameMode"),
        )


@dataclass(frozen=True)
class ProjectMeta:
    name: str
    stages: list[str] = field(default_factory=list)
    version: str | None = None
    game_settings: GameSettings | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ProjectMeta":
        if not isinstance(data, dict):
            raise ManifestError("manifest root must be an object")

        name = data.get("name")
        if not isinstance(name, str):
            raise ManifestError("name is required and must be a string")

        stages = data.get("stages")
        if not isinstance(stages, list) or not all(isinstance(s, str) for s in stages):
            raise ManifestError("stages is required and must be a list of strings")

        raw_settings = data.get("gameSettings")
        settings = None if raw_settings is None else GameSettings.from_dict(raw_settings)

        return cls(
            name=name,
            stages=list(stages),
            version=_opt_str(data, "version"),
            game_settings=settings,
        )


def load_manifest(game_dir: Path) -> ProjectMeta:
    """Parse `game_dir/project.json`. Raises OSError or ValueError on failure."""
    text = (Path(game_dir) / MANIFEST_NAME).read_text(encoding="utf-8")
    return ProjectMeta.from_dict(json.loads(text))


def read_game_settings(game_dir: Path) -> GameSettings | None:
    """Return the manifest's gameSettings, or None if there is nothing usable.

    Missing file, unreadable file, malformed JSON, a manifest of the wrong
    shape and a manifest without a gameSettings block all read as None.
    """
    try:
        meta = load_manifest(game_dir)
    except FileNotFoundError:
        return None
    except (OSError, ValueError, RecursionError) as e:
        warn(f"Ignoring unusable {MANIFEST_NAME} in {game_dir}: {e}")
        return None
    return meta.game_settings
