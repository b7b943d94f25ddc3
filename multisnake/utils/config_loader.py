"""
Configuration Loader - Load configuration from YAML.

Supports hierarchical configuration:
- config/default.yaml - Global settings
- config/games/{game_id}.yaml - Per-game settings

Game-specific settings override defaults.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field
from copy import deepcopy

logger = logging.getLogger(__name__)


@dataclass
class VisualizationConfig:
    """Window settings."""
    title: str = "Multisnake"
    render_fps: int = 60
    padding: int = 20


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class Config:
    """Complete application configuration."""
    # Raw game section, turned into the game's own config class by the caller
    game: Dict[str, Any] = field(default_factory=dict)
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


def _build_config(data: Dict[str, Any]) -> Config:
    config = Config()

    if 'game' in data:
        config.game = dict(data['game'] or {})

    if 'visualization' in data:
        config.visualization = _dict_to_dataclass(data['visualization'], VisualizationConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    return data if data else {}


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_dir() -> Path:
    """Find the config directory."""
    possible_paths = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]

    for path in possible_paths:
        if path.exists() and path.is_dir():
            return path

    # Fallback to project root config folder
    return Path(__file__).parent.parent.parent / "config"


def load_game_config(game_id: str, config_dir: Optional[Path] = None) -> Config:
    """
    Load configuration for a specific game.

    Merges default settings with game-specific settings.
    Game settings override defaults.

    Args:
        game_id: The game identifier (e.g., "snake")
        config_dir: Directory holding default.yaml and games/ (searched if None)

    Returns:
        Config object with merged settings
    """
    config_dir = Path(config_dir) if config_dir is not None else _find_config_dir()

    default_data = _load_yaml_file(config_dir / "default.yaml")
    game_data = _load_yaml_file(config_dir / "games" / f"{game_id}.yaml")

    # Merge configs (game overrides default)
    merged_data = _deep_merge(default_data, game_data)

    if not merged_data:
        logger.info("No config found for game '%s', using defaults", game_id)
        return Config()

    return _build_config(merged_data)
