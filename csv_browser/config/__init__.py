"""
Configuration: global config model and loader.
"""

from .model import CanvasConfig, GlobalConfig, Margin
from .loader import load_global_config

__all__ = ["CanvasConfig", "GlobalConfig", "Margin", "load_global_config"]
