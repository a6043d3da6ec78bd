"""
Configuration Loader - Load and validate configuration from YAML.

config.yaml layout:
- game: SnakeConfig fields, plus an optional "preset" ("walled" or "wrap")
- visualization: window settings for the pygame driver
- logging: log level and optional log file

Missing sections fall back to defaults; unknown keys are ignored.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict

from ..games.snake.config import SnakeConfig

logger = logging.getLogger(__name__)


@dataclass
class VisualizationConfig:
    """Visualization settings."""
    cell_size: int = 25
    render_fps: int = 60
    window_title: str = "Snake"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: SnakeConfig = field(default_factory=SnakeConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Look for config.yaml in the working directory, then the project root."""
    possible_paths = [
        Path.cwd() / "config.yaml",
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def config_from_dict(data: Optional[Dict[str, Any]]) -> Config:
    """
    Build a Config from parsed YAML data.

    Raises:
        ConfigError: If the game section is invalid
    """
    config = Config()
    if not data:
        return config

    if 'game' in data:
        config.game = SnakeConfig.from_dict(data['game'] or {})

    if 'visualization' in data:
        config.visualization = _dict_to_dataclass(data['visualization'], VisualizationConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    config.game.validate()
    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in the
            working directory or project root)

    Returns:
        Config object with all settings

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ConfigError: If the game section is invalid
    """
    if config_path is None:
        path = _find_config_file()
        if path is None:
            logger.info("No config file found, using defaults")
            return Config()
    else:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    logger.debug("Loaded config from %s", path)
    return config_from_dict(data)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)
    data['game'] = config.game.to_dict()

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
