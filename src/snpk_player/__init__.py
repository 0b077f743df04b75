"""StoryNode Player - self-extracting project runtime."""
from .extract import ExtractionError, extract_game, working_dir
from .runtime import GameDataError, WindowConfig, get_game_data_path, resolve_startup_config

__all__ = [
    "ExtractionError",
    "extract_game",
    "working_dir",
    "GameDataError",
    "WindowConfig",
    "get_game_data_path",
    "resolve_startup_config",
]
