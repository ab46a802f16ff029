from pathlib import Path

from loguru import logger
from omegaconf import DictConfig, ListConfig, OmegaConf

from .config_models import (
    DirectoryConfig,
    DistanceConfig,
    PathsConfig,
    RenderingConfig,
)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"


class ConfigManager:
    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR):
        self._config_dir = Path(config_dir)
        self._raw_config = self._load_config()

        self.paths = self._parse_paths_config()
        self.directory = self._parse_directory_config()
        self.distance = self._parse_distance_config()
        self.rendering = self._parse_rendering_config()

    def _load_config(self) -> ListConfig | DictConfig:
        if not self._config_dir.exists():
            logger.error(f"Config directory not found: {self._config_dir}")
            raise FileNotFoundError(f"Config directory not found: {self._config_dir}")
        if not self._config_dir.is_dir():
            logger.error(f"Config path is not a directory: {self._config_dir}")
            raise NotADirectoryError(
                f"Config path is not a directory: {self._config_dir}"
            )

        config_files = sorted(self._config_dir.glob("*.yaml"))
        configs = []

        if not config_files:
            logger.error(f"No config files found in {self._config_dir}")
            raise FileNotFoundError(f"No config files found in {self._config_dir}")

        for file in config_files:
            config = OmegaConf.load(file)
            configs.append(config)

        merged_config = OmegaConf.merge(*configs)
        return merged_config

    def _parse_paths_config(self) -> PathsConfig:
        paths_config = OmegaConf.select(self._raw_config, "paths")
        if paths_config is None:
            logger.warning("Paths config not found; using defaults")
            return PathsConfig()

        paths_dict = OmegaConf.to_container(
            paths_config,
            resolve=True,
            throw_on_missing=True,
        )

        return PathsConfig(**paths_dict)  # type: ignore

    def _parse_directory_config(self) -> DirectoryConfig:
        directory_config = OmegaConf.select(self._raw_config, "directory")
        if directory_config is None:
            logger.error(f"Directory config not found in {self._config_dir}")
            raise ValueError(f"Directory config not found in {self._config_dir}")

        directory_dict = OmegaConf.to_container(
            directory_config,
            resolve=True,
            throw_on_missing=True,
        )

        return DirectoryConfig(**directory_dict)  # type: ignore

    def _parse_distance_config(self) -> DistanceConfig:
        distance_config = OmegaConf.select(self._raw_config, "distance")
        if distance_config is None:
            logger.warning("Distance config not found; using defaults")
            return DistanceConfig()

        distance_dict = OmegaConf.to_container(
            distance_config,
            resolve=True,
            throw_on_missing=False,
        )

        return DistanceConfig(**distance_dict)  # type: ignore

    def _parse_rendering_config(self) -> RenderingConfig:
        rendering_config = OmegaConf.select(self._raw_config, "rendering")
        if rendering_config is None:
            logger.warning("Rendering config not found; using defaults")
            return RenderingConfig()

        rendering_dict = OmegaConf.to_container(
            rendering_config,
            resolve=True,
            throw_on_missing=False,
        )

        return RenderingConfig(**rendering_dict)  # type: ignore
