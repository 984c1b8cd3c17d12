"""Configuration management for the DSG library."""

import logging
from pathlib import Path
from typing import Optional, Dict, Any

import yaml
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


class GeometryConfig(BaseModel):
    """Configuration for footprint predicates."""
    overlap_threshold: float = 0.75  # Share of an object's footprint a place must cover

    @field_validator("overlap_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        if not 0.0 < v <= 1.0:
            raise ValueError("overlap_threshold must be in (0, 1]")
        return v


class DescriptionConfig(BaseModel):
    """Configuration for the scene description envelope."""
    output_file: str = "SceneDescription.json"
    json_indent: int = 2


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = "INFO"
    log_to_file: bool = False
    log_directory: str = "logs"
    max_log_size_mb: int = 100
    backup_count: int = 5


class DSGConfig(BaseModel):
    """Root configuration for the DSG library."""

    # System settings
    project_name: str = "DSG"
    version: str = "0.1.0"
    debug_mode: bool = False

    # Sub-configurations
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    description: DescriptionConfig = Field(default_factory=DescriptionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def setup_logging(self) -> None:
        """Configure logging based on config."""
        level_name = "DEBUG" if self.debug_mode else self.logging.level.upper()
        log_level = getattr(logging, level_name)

        handlers = []

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

        # File handler
        if self.logging.log_to_file:
            log_dir = Path(self.logging.log_directory)
            log_dir.mkdir(exist_ok=True, parents=True)

            from logging.handlers import RotatingFileHandler
            file_handler = RotatingFileHandler(
                log_dir / "dsg.log",
                maxBytes=self.logging.max_log_size_mb * 1024 * 1024,
                backupCount=self.logging.backup_count
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        logging.basicConfig(
            level=log_level,
            handlers=handlers,
            force=True
        )

        logger.info(f"Logging configured: level={level_name}")


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> DSGConfig:
    """Load configuration from YAML file with optional overrides.

    Args:
        config_path: Path to YAML config file. If None, uses
            config/default.yaml under the working directory, then the
            one in the source checkout
        overrides: Dictionary of config overrides (nested keys with dots)

    Returns:
        Validated DSGConfig instance

    Example:
        >>> config = load_config("config/default.yaml")
        >>> config = load_config(overrides={"geometry.overlap_threshold": 0.5})
    """
    if config_path is None:
        config_path = Path.cwd() / "config" / "default.yaml"
        if not config_path.exists():
            # Source checkout: src/dsg/utils/config.py -> repo root
            repo_root = Path(__file__).parent.parent.parent.parent
            config_path = repo_root / "config" / "default.yaml"
    else:
        config_path = Path(config_path)

    config_dict = {}
    if config_path.exists():
        logger.info(f"Loading config from {config_path}")
        with open(config_path) as f:
            config_dict = yaml.safe_load(f) or {}
    else:
        logger.warning(f"Config file not found: {config_path}, using defaults")

    if overrides:
        config_dict = _apply_overrides(config_dict, overrides)

    config = DSGConfig(**config_dict)
    config.setup_logging()

    return config


def _apply_overrides(
    config_dict: Dict[str, Any],
    overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """Apply nested overrides to config dictionary.

    Example:
        overrides = {"geometry.overlap_threshold": 0.5}
        -> config_dict["geometry"]["overlap_threshold"] = 0.5
    """
    for key, value in overrides.items():
        keys = key.split(".")
        d = config_dict
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        d[keys[-1]] = value
    return config_dict
