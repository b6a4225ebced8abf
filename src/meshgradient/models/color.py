"""
Color model - Control point color representation

Handles color as direct normalized RGB or as a named preset.
Uses ColorManager for preset data and utils.colors for conversions.
"""

import random
from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

from meshgradient.models.enums import ColorMode
from meshgradient.utils.colors import clamp01, rgb255_to_unit

if TYPE_CHECKING:
    from meshgradient.managers.color_manager import ColorManager


@dataclass(frozen=True)
class Color:
    """
    Immutable color of a control point

    Channels are normalized floats in [0, 1]. A PRESET color carries its
    preset name and the resolved channels; a PRESET color restored without a
    ColorManager has no channels, and to_rgb() raises ValueError for it.

    Examples:
        color = Color.from_rgb(1.0, 0.5, 0.0)
        color = Color.from_preset("indigo", color_manager)

        r, g, b = color.to_rgb()
    """

    _rgb: Optional[Tuple[float, float, float]] = None
    _preset_name: Optional[str] = None
    alpha: float = 1.0
    mode: ColorMode = ColorMode.RGB

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> 'Color':
        """Create from normalized channels (clamped to [0, 1])"""
        return cls(
            _rgb=(clamp01(float(r)), clamp01(float(g)), clamp01(float(b))),
            alpha=clamp01(float(alpha)),
            mode=ColorMode.RGB,
        )

    @classmethod
    def from_preset(cls, preset_name: str, color_manager: 'ColorManager') -> 'Color':
        """
        Create from preset name

        Raises:
            KeyError: If the preset is unknown to the color manager
        """
        rgb = color_manager.get_preset_rgb(preset_name)
        return cls(_rgb=rgb255_to_unit(*rgb), _preset_name=preset_name, mode=ColorMode.PRESET)

    @classmethod
    def random(cls, rng: random.Random) -> 'Color':
        """Uniform random opaque color, each channel in [0, 1]"""
        return cls.from_rgb(rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0))

    @staticmethod
    def clear() -> 'Color':
        """Fully transparent placeholder"""
        return Color.from_rgb(0.0, 0.0, 0.0, alpha=0.0)

    # === COMPONENTS ===

    @property
    def preset_name(self) -> Optional[str]:
        return self._preset_name

    def to_rgb(self) -> Tuple[float, float, float]:
        """
        Normalized (r, g, b) channels

        Raises:
            ValueError: If the color has no resolved channels
        """
        if self._rgb is None:
            raise ValueError(f"Color has no RGB components: {self}")
        return self._rgb

    # === SERIALIZATION ===

    def to_dict(self) -> dict:
        if self.mode == ColorMode.PRESET:
            return {"mode": "PRESET", "preset_name": self._preset_name}
        return {"mode": "RGB", "rgb": list(self.to_rgb()), "alpha": self.alpha}

    @classmethod
    def from_dict(cls, data: dict, color_manager: Optional['ColorManager'] = None) -> 'Color':
        """
        Deserialize from to_dict() output

        A PRESET entry is resolved through the color manager when one is given;
        otherwise the preset name is kept without channels.
        """
        if data["mode"] == "PRESET":
            if color_manager is not None:
                return cls.from_preset(data["preset_name"], color_manager)
            return cls(_preset_name=data["preset_name"], mode=ColorMode.PRESET)
        return cls.from_rgb(*data["rgb"], alpha=data.get("alpha", 1.0))

    # === STRING REPRESENTATION ===

    def __str__(self) -> str:
        if self.mode == ColorMode.PRESET:
            return f"Color(PRESET={self._preset_name})"
        if self._rgb is None:
            return "Color(RGB=None)"
        r, g, b = self._rgb
        return f"Color(RGB=({r:.3f}, {g:.3f}, {b:.3f}), alpha={self.alpha:.2f})"
