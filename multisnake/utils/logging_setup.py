"""
Logging setup driven by the ``logging:`` section of the configuration.
"""
import logging
from pathlib import Path
from typing import Optional

from .config_loader import LoggingConfig


def setup_logging(config: Optional[LoggingConfig] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``multisnake`` logger hierarchy.

    Args:
        config: Logging section of the application config
        level: Level name overriding the configured one (e.g. from the CLI)

    Returns:
        The package root logger

    Raises:
        ValueError: If the level name is unknown
    """
    config = config or LoggingConfig()
    level_name = (level or config.level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    root = logging.getLogger("multisnake")
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
