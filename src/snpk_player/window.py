"""Host window bridge.

The window is created with the resolved config already applied, so the UI
never shows at the wrong size or title. pywebview is imported lazily; nothing
else in the player needs it.
"""
from __future__ import annotations

from pathlib import Path

from .runtime import WindowConfig, get_game_data_path

DEFAULT_UI = Path(__file__).resolve().parent / "ui" / "index.html"


class PlayerApi:
    """Command surface exposed to the UI as `window.pywebview.api`.

    pywebview runs these on worker threads and turns a raised exception into
    a rejected promise carrying its message.
    """

    def __init__(self, config: WindowConfig, exe_path: Path | None = None, work_dir: Path | None = None):
        self._config = config
        self._exe_path = exe_path
        self._work_dir = work_dir

    def get_game_data_path(self) -> str:
        return get_game_data_path(exe_path=self._exe_path, work_dir=self._work_dir)

    def get_game_settings(self) -> dict:
        return self._config.to_dict()


def window_kwargs(config: WindowConfig, url: str) -> dict:
    # x/y left unset: pywebview centres the window.
    return {
        "title": config.title,
        "url": url,
        "width": config.width,
        "height": config.height,
        "resizable": config.resizable,
        "fullscreen": config.fullscreen,
    }


def launch(config: WindowConfig, api: PlayerApi, url: str | None = None, debug: bool = False) -> None:
    import webview

    webview.create_window(js_api=api, **window_kwargs(config, url or DEFAULT_UI.as_uri()))
    webview.start(debug=debug)
