#!/usr/bin/env python3
"""
Multisnake - Play Script

Two or more players share one keyboard.

Usage:
    python scripts/play.py                         # Default two-player game
    python scripts/play.py --width 40 --height 25  # Bigger board
    python scripts/play.py --speed 200 --food 5    # Faster, more food
"""
import sys
import os
import argparse
import logging
import warnings
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

from multisnake.games import GameRegistry
from multisnake.games.snake.driver import GameDriver
from multisnake.utils.config_loader import Config, load_game_config
from multisnake.utils.logging_setup import setup_logging

logger = logging.getLogger("multisnake.play")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Multisnake - local multiplayer Snake",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py
  python scripts/play.py --width 40 --height 25
  python scripts/play.py --speed 200 --food 5 --seed 7
"""
    )

    parser.add_argument(
        "-g", "--game",
        type=str,
        default="snake",
        metavar="GAME_ID",
        help="Game to play (default: snake)"
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Directory holding default.yaml and games/ (default: ./config)"
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=None, help="Grid height in cells")
    parser.add_argument("--speed", type=int, default=None, help="Milliseconds per tick")
    parser.add_argument("--food", type=int, default=None, help="Pellets kept on the board")
    parser.add_argument("--cell-size", type=int, default=None, help="Cell size in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override the configured log level (DEBUG, INFO, ...)"
    )

    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Dict[str, Any]:
    """Merge command line overrides into the game section."""
    game = dict(config.game)
    overrides = {
        "grid_width": args.width,
        "grid_height": args.height,
        "speed_ms": args.speed,
        "food_count": args.food,
        "cell_size": args.cell_size,
    }
    for key, value in overrides.items():
        if value is not None:
            game[key] = value
    return game


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config = load_game_config(args.game, args.config_dir)
    setup_logging(config.logging, args.log_level)

    if not GameRegistry.is_available(args.game):
        logger.error("Unknown game: %s", args.game)
        return 2

    config_class = GameRegistry.get_config_class(args.game)
    try:
        game_config = config_class.from_dict(apply_overrides(config, args))
        game = GameRegistry.create_game(args.game, config=game_config, seed=args.seed)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    renderer = GameRegistry.create_renderer(
        args.game,
        cell_size=game_config.cell_size,
        grid_width=game_config.grid_width,
        grid_height=game_config.grid_height,
        food_color=game_config.food_color,
    )
    driver = GameDriver(
        game,
        renderer,
        speed_ms=game_config.speed_ms,
        fps=config.visualization.render_fps,
        title=config.visualization.title,
        padding=config.visualization.padding,
    )

    for player in game_config.players:
        keys = ", ".join(f"{k}={v}" for k, v in player.key_bindings)
        logger.info("Player %s: %s", player.name, keys)

    best = driver.run()
    logger.info("Best score: %d", best)
    return 0


if __name__ == "__main__":
    sys.exit(main())
