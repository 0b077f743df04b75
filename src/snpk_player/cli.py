import json
from pathlib import Path

import click

from snpk_core.footer import locate_archive, read_embedded_archive

from .const import ERRORS
from .extract import ExtractionError, list_entries
from .runtime import current_exe, get_game_data_path, resolve_startup_config

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

exe_option = click.option(
    "--exe",
    "exe_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Player binary to read (default: the running executable).",
)


def _fail(code: str, **extra) -> dict:
    err = {"code": code, "message": ERRORS[code], **extra}
    return {"status": "FAIL", "error_count": 1, "errors": [err]}


def inspect_binary(exe_path: Path) -> dict:
    span = locate_archive(exe_path)
    if span is None:
        return _fail("E_NO_TRAILER", path=str(exe_path))
    offset, size = span
    zip_data = read_embedded_archive(exe_path)
    try:
        entries = list_entries(zip_data or b"")
    except ExtractionError as e:
        return _fail(e.code, detail=e.detail)
    return {
        "status": "PASS",
        "error_count": 0,
        "errors": [],
        "archive_offset": offset,
        "archive_size": size,
        "entries": entries,
    }


@click.group()
def main():
    pass


@main.command("path")
@exe_option
def path_cmd(exe_path: Path | None):
    """Print the project root the player would load."""
    try:
        click.echo(get_game_data_path(exe_path=exe_path))
    except Exception as e:
        # Fail closed with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)


@main.command("config")
@exe_option
def config_cmd(exe_path: Path | None):
    """Print the startup window configuration."""
    config = resolve_startup_config(exe_path=exe_path)
    click.echo(json.dumps(config.to_dict(), **CANONICAL_JSON_KW))


@main.command("inspect")
@click.argument("exe", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect_cmd(exe: Path | None):
    """Describe the archive embedded in a player binary."""
    result = inspect_binary(exe if exe is not None else current_exe())
    click.echo(json.dumps(result, **CANONICAL_JSON_KW))
    if result["status"] != "PASS":
        raise SystemExit(1)


@main.command("run")
@exe_option
@click.option("--ui", "ui_url", default=None, help="URL of the player UI (default: bundled shell page).")
@click.option("--debug", is_flag=True, help="Open the window with developer tools enabled.")
def run_cmd(exe_path: Path | None, ui_url: str | None, debug: bool):
    """Configure the window from the embedded project and start the player."""
    from .window import PlayerApi, launch

    config = resolve_startup_config(exe_path=exe_path)
    launch(config, PlayerApi(config, exe_path=exe_path), url=ui_url, debug=debug)


if __name__ == "__main__":
    main()
