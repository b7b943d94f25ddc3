"""
Game Driver - owns the window, the tick timer and keyboard input.

The game itself never keeps time or listens to devices. The driver polls
pygame events, forwards key names to the game, advances one tick every
``speed_ms`` milliseconds and stops ticking once the game is over.

Controls:
    Player keys (per configuration): steer
    R: Restart after game over
    ESC: Quit
"""
import logging
from typing import Optional

import pygame

from .game import SnakeGame, TickResult
from .renderer import SnakeRenderer, BLACK, to_color

logger = logging.getLogger(__name__)

GAME_OVER_COLOR = (255, 100, 100)


class GameDriver:
    """
    Fixed-interval driver for a SnakeGame with its own window.

    Lifecycle is explicit: start() opens the window, run() loops until the
    player quits, stop() releases pygame. process_event() and update() can
    be called directly to drive the game without a real event loop.
    """

    def __init__(
        self,
        game: SnakeGame,
        renderer: Optional[SnakeRenderer] = None,
        speed_ms: Optional[int] = None,
        fps: int = 60,
        title: str = "Multisnake",
        padding: int = 20
    ):
        self.game = game
        self.renderer = renderer or SnakeRenderer(
            cell_size=game.config.cell_size,
            grid_width=game.width,
            grid_height=game.height,
            food_color=game.config.food_color,
        )
        self.speed_ms = speed_ms if speed_ms is not None else game.config.speed_ms
        self.fps = fps
        self.title = title
        self.padding = padding

        self.running = False
        self.surface = None
        self.font = None
        self.clock = None
        self.window_width = 0
        self.window_height = 0
        self._last_tick_ms = 0

    def start(self) -> None:
        """Open the window and start the tick timer."""
        pygame.init()
        board_w, board_h = self.renderer.get_preferred_size()
        self.window_width = board_w + self.padding * 2
        self.window_height = board_h + self.padding * 2 + 40  # Extra for scores
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(self.title)
        self.renderer.set_render_area(self.padding, self.padding, board_w, board_h)

        self.font = pygame.font.Font(None, 32)
        self.clock = pygame.time.Clock()
        self._last_tick_ms = pygame.time.get_ticks()
        self.running = True
        logger.info("Driver started: tick every %d ms", self.speed_ms)

    def stop(self) -> None:
        """Stop ticking and release pygame."""
        if self.running:
            logger.info("Driver stopped after %d ticks", self.game.tick_count)
        self.running = False
        pygame.quit()

    def restart(self) -> None:
        self.game.reset()
        self._last_tick_ms = pygame.time.get_ticks()

    def process_event(self, event) -> None:
        """Handle one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
            return

        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_ESCAPE:
            self.running = False
            return

        if self.game.game_over:
            # Input is detached once the game is over, apart from restart
            if event.key == pygame.K_r:
                self.restart()
            return

        key_name = pygame.key.name(event.key)
        if self.game.handle_key(key_name):
            logger.debug("Key %r dispatched", key_name)

    def update(self, now_ms: int) -> Optional[TickResult]:
        """
        Advance the game if a full interval has elapsed.

        Args:
            now_ms: Current time in milliseconds

        Returns:
            The tick result, or None if no tick was due
        """
        if not self.running or self.game.game_over:
            return None
        if now_ms - self._last_tick_ms < self.speed_ms:
            return None

        self._last_tick_ms = now_ms
        result = self.game.advance_tick()
        if result.game_over:
            logger.info("Timer stopped: %s crashed", ", ".join(result.crashed))
        return result

    def draw(self) -> None:
        """Draw the board, scores and game over banner."""
        self.surface.fill(BLACK)
        state = self.game.get_state()
        self.renderer.render(state, self.surface)

        x = self.padding
        y = self.window_height - self.padding - 20
        for snake in state["snakes"]:
            text = self.font.render(f"{snake['name']}: {snake['score']}", True, to_color(snake["color"]))
            self.surface.blit(text, (x, y))
            x += text.get_width() + 30

        if self.game.game_over:
            banner = self.font.render(
                f"GAME OVER - {', '.join(state['crashed'])} crashed (R to restart)",
                True, GAME_OVER_COLOR
            )
            self.surface.blit(
                banner,
                (self.window_width // 2 - banner.get_width() // 2,
                 self.window_height // 2 - banner.get_height() // 2)
            )

        pygame.display.flip()

    def run(self) -> int:
        """
        Run until the window is closed or ESC is pressed.

        Returns:
            Best score of the last game
        """
        self.start()
        try:
            while self.running:
                for event in pygame.event.get():
                    self.process_event(event)
                self.update(pygame.time.get_ticks())
                if self.running:
                    self.draw()
                    self.clock.tick(self.fps)
        finally:
            self.stop()
        return self.game.get_score()
