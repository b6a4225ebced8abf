"""
Managers for configuration
"""

from .config_manager import ConfigManager, EditorConfig
from .color_manager import ColorManager

__all__ = ['ConfigManager', 'EditorConfig', 'ColorManager']
