"""
Multisnake - grid-based multiplayer Snake.

Modules:
- core: Abstract interfaces for games and renderers
- games: Game implementations (Snake) and the game registry
- utils: Configuration and logging
"""

__version__ = "1.0.0"
