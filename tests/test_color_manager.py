import pytest

from meshgradient.managers.color_manager import ColorManager
from meshgradient.models.enums import ColorMode


def test_loaded_presets(color_manager):
    assert len(color_manager.preset_order) == 10
    assert len(color_manager.default_palette) == 9
    assert color_manager.has_preset("indigo")
    assert not color_manager.has_preset("sunset")
    assert color_manager.get_preset_rgb("red") == (255, 59, 48)


def test_every_listed_name_is_a_preset(color_manager):
    for name in color_manager.preset_order + color_manager.default_palette:
        assert color_manager.has_preset(name)


def test_default_palette_colors(color_manager):
    colors = color_manager.default_palette_colors()

    assert [c.preset_name for c in colors] == color_manager.default_palette
    assert all(c.mode == ColorMode.PRESET for c in colors)


def test_unknown_preset_raises():
    manager = ColorManager({"presets": {"white": {"rgb": [255, 255, 255]}}})

    with pytest.raises(KeyError):
        manager.get_preset_rgb("black")
    with pytest.raises(KeyError):
        manager.get_preset_color("black")


def test_palette_with_missing_preset_raises():
    manager = ColorManager({"presets": {}, "default_palette": ["red"]})
    with pytest.raises(KeyError):
        manager.default_palette_colors()
