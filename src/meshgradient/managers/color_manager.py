"""
Color Manager - Processes color preset definitions

Processes color data from ConfigManager (does NOT load files).
Single responsibility: Parse and provide access to color presets and the
default mesh palette.
"""

from typing import Dict, List, Tuple

from meshgradient.models.color import Color


class ColorManager:
    """
    Color preset manager (data processor only)

    Responsibilities:
    - Parse color preset data
    - Cache RGB values
    - Provide the picker swatches (preset_order)
    - Provide the default mesh palette

    Example:
        color_mgr = ColorManager(data)

        rgb = color_mgr.get_preset_rgb("indigo")
        palette = color_mgr.default_palette_colors()
    """

    def __init__(self, data: dict):
        """
        Args:
            data: Config dict with 'presets', 'preset_order' and
                  'default_palette' keys
                  Example: {
                      'presets': {'red': {'rgb': [255,59,48], 'category': 'basic'}, ...},
                      'preset_order': ['red', 'orange', ...],
                      'default_palette': ['red', 'purple', ...]
                  }
        """
        self.data = data
        self._preset_colors_cache: Dict[str, Tuple[int, int, int]] = {}
        self._process_data()

    def _process_data(self):
        self._preset_colors_cache = {
            name: tuple(preset_data['rgb'])
            for name, preset_data in (self.data.get('presets') or {}).items()
        }

    @property
    def preset_colors(self) -> Dict[str, Tuple[int, int, int]]:
        """All preset colors as {name: (r,g,b)} with 8-bit channels"""
        return self._preset_colors_cache

    @property
    def preset_order(self) -> List[str]:
        """Picker swatch order"""
        return list(self.data.get('preset_order') or [])

    @property
    def default_palette(self) -> List[str]:
        """Preset names assigned cyclically to a fresh mesh"""
        return list(self.data.get('default_palette') or [])

    def has_preset(self, name: str) -> bool:
        return name in self._preset_colors_cache

    def get_preset_rgb(self, name: str) -> Tuple[int, int, int]:
        """
        Raises:
            KeyError: If preset doesn't exist
        """
        return self._preset_colors_cache[name]

    def get_preset_color(self, name: str) -> Color:
        """
        Raises:
            KeyError: If preset doesn't exist
        """
        return Color.from_preset(name, self)

    def default_palette_colors(self) -> List[Color]:
        """
        Raises:
            KeyError: If the palette names a missing preset
        """
        return [self.get_preset_color(name) for name in self.default_palette]
