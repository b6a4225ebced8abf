import pytest

from meshgradient.managers.config_manager import CONFIG_DIR, ConfigManager, EditorConfig
from meshgradient.models.enums import AnimationKind


def test_load_include_config(config_manager):
    assert config_manager.used_fallback is False
    assert config_manager.editor == EditorConfig()
    assert "presets" in config_manager.data
    assert "editor" in config_manager.data


def test_factory_defaults_match_include_config():
    defaults = ConfigManager(config_path=CONFIG_DIR / "factory_defaults.yaml")
    defaults.load()

    assert defaults.used_fallback is False
    assert defaults.editor == EditorConfig()
    assert defaults.color_manager.default_palette == ConfigManager().load()["default_palette"]


def test_missing_config_falls_back(tmp_path):
    config = ConfigManager(config_path=tmp_path / "missing.yaml")
    config.load()

    assert config.used_fallback is True
    assert config.color_manager is not None
    assert config.editor.width == 3


def test_missing_include_falls_back(tmp_path):
    (tmp_path / "config.yaml").write_text("include:\n  - colors.yaml\n", encoding="utf-8")

    config = ConfigManager(config_path=tmp_path / "config.yaml")
    config.load()

    assert config.used_fallback is True


def test_empty_palette_falls_back(tmp_path):
    (tmp_path / "config.yaml").write_text(
        "presets:\n  red: { rgb: [255, 0, 0] }\ndefault_palette: []\n",
        encoding="utf-8",
    )

    config = ConfigManager(config_path=tmp_path / "config.yaml")
    config.load()

    assert config.used_fallback is True
    assert len(config.color_manager.default_palette) == 9


def test_monolithic_config(tmp_path):
    (tmp_path / "config.yaml").write_text(
        "presets:\n"
        "  red: { rgb: [255, 0, 0] }\n"
        "  blue: { rgb: [0, 0, 255] }\n"
        "default_palette: [red, blue]\n"
        "editor:\n"
        "  width: 4\n"
        "  height: 2\n"
        "  animation: { enabled: true, kind: spiral, speed: 2.5 }\n",
        encoding="utf-8",
    )

    config = ConfigManager(config_path=tmp_path / "config.yaml")
    config.load()

    assert config.used_fallback is False
    assert (config.editor.width, config.editor.height) == (4, 2)
    assert config.editor.animation_enabled is True
    assert config.editor.animation_kind == AnimationKind.SPIRAL
    assert config.editor.speed == 2.5


def test_editor_config_clamps():
    editor = EditorConfig.from_dict({
        "editor": {"width": 12, "height": 0, "animation": {"speed": 99, "intensity": -1}},
    })

    assert (editor.width, editor.height) == (5, 2)
    assert editor.speed == 3.0
    assert editor.intensity == 0.1


def test_editor_config_unknown_kind():
    with pytest.raises(ValueError):
        EditorConfig.from_dict({"editor": {"animation": {"kind": "Twirl"}}})
