import json

import pytest

from snpk_core.manifest import GameSettings, ManifestError, ProjectMeta, load_manifest, read_game_settings


def write_manifest(d, obj):
    (d / "project.json").write_text(obj if isinstance(obj, str) else json.dumps(obj), encoding="utf-8")


def test_full_manifest(tmp_path):
    write_manifest(tmp_path, {
        "name": "Demo",
        "version": "1.2.0",
        "stages": ["intro", "act-1"],
        "gameSettings": {
            "title": "Demo Game",
            "windowWidth": 800,
            "windowHeight": 600,
            "resizable": False,
            "fullscreen": True,
            "defaultThemeId": "noir",
            "defaultGameMode": "textAdventure",
        },
        "somethingElse": {"ignored": True},
    })
    meta = load_manifest(tmp_path)
    assert meta.name == "Demo"
    assert meta.version == "1.2.0"
    assert meta.stages == ["intro", "act-1"]
    assert meta.game_settings == GameSettings(
        title="Demo Game",
        window_width=800,
        window_height=600,
        resizable=False,
        fullscreen=True,
        default_theme_id="noir",
        default_game_mode="textAdventure",
    )


def test_partial_settings_leave_fields_unset(tmp_path):
    write_manifest(tmp_path, {"name": "Demo", "stages": [], "gameSettings": {"windowWidth": 1024}})
    settings = read_game_settings(tmp_path)
    assert settings.window_width == 1024
    assert settings.window_height is None
    assert settings.title is None


def test_missing_settings_block(tmp_path):
    write_manifest(tmp_path, {"name": "Demo", "stages": ["a"]})
    assert read_game_settings(tmp_path) is None


def test_missing_manifest(tmp_path):
    assert read_game_settings(tmp_path) is None


def test_malformed_json_warns(tmp_path):
    write_manifest(tmp_path, "{not json")
    with pytest.warns(UserWarning, match="project.json"):
        assert read_game_settings(tmp_path) is None


@pytest.mark.parametrize("obj", [
    [],
    {"stages": []},
    {"name": 7, "stages": []},
    {"name": "Demo"},
    {"name": "Demo", "stages": [1, 2]},
    {"name": "Demo", "stages": [], "version": 3},
    {"name": "Demo", "stages": [], "gameSettings": "big"},
    {"name": "Demo", "stages": [], "gameSettings": {"windowWidth": "800"}},
    {"name": "Demo", "stages": [], "gameSettings": {"windowWidth": 800.5}},
    {"name": "Demo", "stages": [], "gameSettings": {"windowHeight": -1}},
    {"name": "Demo", "stages": [], "gameSettings": {"windowHeight": 2**32}},
    {"name": "Demo", "stages": [], "gameSettings": {"windowWidth": True}},
    {"name": "Demo", "stages": [], "gameSettings": {"resizable": "yes"}},
    {"name": "Demo", "stages": [], "gameSettings": {"title": ["x"]}},
])
def test_wrong_shapes_are_rejected(obj):
    with pytest.raises(ManifestError):
        ProjectMeta.from_dict(obj)


def test_wrong_shape_reads_as_no_settings(tmp_path):
    write_manifest(tmp_path, {"name": "Demo", "stages": [], "gameSettings": {"windowWidth": "wide"}})
    with pytest.warns(UserWarning):
        assert read_game_settings(tmp_path) is None


def test_null_fields_are_absent():
    meta = ProjectMeta.from_dict({
        "name": "Demo",
        "stages": [],
        "version": None,
        "gameSettings": {"title": None, "windowWidth": None},
    })
    assert meta.version is None
    assert meta.game_settings == GameSettings()


def test_non_utf8_manifest(tmp_path):
    (tmp_path / "project.json").write_bytes(b"\xff\xfe{}")
    with pytest.warns(UserWarning):
        assert read_game_settings(tmp_path) is None


def test_deeply_nested_manifest(tmp_path):
    write_manifest(tmp_path, "[" * 200000)
    with pytest.warns(UserWarning, match="project.json"):
        assert read_game_settings(tmp_path) is None
