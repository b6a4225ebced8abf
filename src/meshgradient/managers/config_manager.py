"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and initializes sub-managers.
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union, TYPE_CHECKING

from meshgradient.models.animation_params import (
    AnimationParamID,
    GridSizeParam,
    IntensityParam,
    SpeedParam,
)
from meshgradient.models.enums import AnimationKind
from meshgradient.utils.logger import LogCategory, get_logger
from meshgradient.utils.serialization import Serializer

if TYPE_CHECKING:
    from meshgradient.managers.color_manager import ColorManager

log = get_logger().for_category(LogCategory.CONFIG)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


@dataclass(frozen=True)
class EditorConfig:
    """Editor startup settings (editor.yaml)"""
    width: int = 3
    height: int = 3
    smooth: bool = True
    animation_enabled: bool = False
    animation_kind: AnimationKind = AnimationKind.WAVE
    speed: float = 1.0
    intensity: float = 1.0
    fps: int = 60
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @classmethod
    def from_dict(cls, data: Dict) -> 'EditorConfig':
        """
        Build from the merged config dict, clamping values into range

        Raises:
            ValueError: If the animation kind is unknown
        """
        editor = data.get("editor") or {}
        animation = editor.get("animation") or {}
        render = data.get("render") or {}
        api = data.get("api") or {}

        defaults = cls()
        kind = animation.get("kind")

        return cls(
            width=GridSizeParam(AnimationParamID.GRID_WIDTH).clamp(editor.get("width", defaults.width)),
            height=GridSizeParam(AnimationParamID.GRID_HEIGHT).clamp(editor.get("height", defaults.height)),
            smooth=bool(editor.get("smooth", defaults.smooth)),
            animation_enabled=bool(animation.get("enabled", defaults.animation_enabled)),
            animation_kind=Serializer.str_to_animation_kind(kind) if kind else defaults.animation_kind,
            speed=SpeedParam().clamp(animation.get("speed", defaults.speed)),
            intensity=IntensityParam().clamp(animation.get("intensity", defaults.intensity)),
            fps=int(render.get("fps", defaults.fps)),
            api_host=str(api.get("host", defaults.api_host)),
            api_port=int(api.get("port", defaults.api_port)),
        )


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes the include: directive to load modular
    YAML files. Initializes ColorManager and EditorConfig.

    Example:
        config = ConfigManager()
        config.load()

        palette = config.color_manager.default_palette_colors()
        width = config.editor.width
    """

    def __init__(
        self,
        config_path: Union[str, Path] = CONFIG_DIR / "config.yaml",
        defaults_path: Union[str, Path] = CONFIG_DIR / "factory_defaults.yaml",
    ):
        """
        Args:
            config_path: Path to main config.yaml
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict = {}
        self.used_fallback = False

        # Initialized in load()
        self.color_manager: Optional['ColorManager'] = None
        self.editor: EditorConfig = EditorConfig()

    def load(self) -> Dict:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has an 'include:' list, load and merge those files
        3. Otherwise treat it as a monolithic config
        4. Fall back to factory defaults on any failure
        5. Initialize sub-managers

        Returns:
            Merged config data dict
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], self.config_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

            self._initialize_managers()
            self.used_fallback = False

        except Exception as ex:
            log.error("Failed to load config", path=str(self.config_path), error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            with open(self.factory_defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}
            self._initialize_managers()
            self.used_fallback = True

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: Filenames to load (e.g., ["colors.yaml", "editor.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged: Dict = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        log.info("Config merge complete", total_keys=len(merged))
        return merged

    def _initialize_managers(self):
        """
        Build sub-managers from self.data

        Raises:
            KeyError: If the default palette names an unknown preset
            ValueError: If the palette is empty or the animation kind unknown
        """
        from meshgradient.managers.color_manager import ColorManager

        color_data = {
            'presets': self.data.get('presets', {}),
            'preset_order': self.data.get('preset_order', []),
            'default_palette': self.data.get('default_palette', []),
        }
        color_manager = ColorManager(color_data)

        palette = color_manager.default_palette_colors()
        if not palette:
            raise ValueError("default_palette is empty")

        self.editor = EditorConfig.from_dict(self.data)
        self.color_manager = color_manager

        log.info(
            f"ColorManager initialized with {len(color_manager.preset_colors)} presets",
            palette=len(palette),
            grid=f"{self.editor.width}x{self.editor.height}",
        )
