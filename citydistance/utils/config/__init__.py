from .config_manager import DEFAULT_CONFIG_DIR, ConfigManager
from .config_models import (
    DirectoryConfig,
    DistanceConfig,
    PathsConfig,
    PlaceEntryConfig,
    RenderingConfig,
)
from .logger import set_logger

__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_DIR",
    "DirectoryConfig",
    "DistanceConfig",
    "PathsConfig",
    "PlaceEntryConfig",
    "RenderingConfig",
    "set_logger",
]
