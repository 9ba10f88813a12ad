import logging

import pygame

from .config import *
from .engine import GameStepEngine, GameState
from .snake import Direction
from .timer import StepTimer

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class SnakeGame:
    """Pygame window, keyboard input and tick loop around a GameStepEngine."""

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else GameStepEngine()

        pygame.init()
        width = self.engine.cols * self.engine.grid.tile
        height = self.engine.rows * self.engine.grid.tile
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('monospace', 18)
        self.small_font = pygame.font.SysFont('monospace', 14)

        self.timer = StepTimer(self.engine.tick_interval_ms)
        self.snapshot = None
        self.running = True

    def restart(self):
        """Start a new round and a fresh tick source for it."""
        self.snapshot = self.engine.restart()
        self.timer.start()

    def handle_event(self, event):
        """Translate one pygame event into engine calls."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in KEY_DIRECTIONS:
                self.engine.set_pending_direction(KEY_DIRECTIONS[event.key])
            elif event.key == pygame.K_SPACE:
                # Restart only from the game over screen
                if self.engine.state is GameState.GAME_OVER:
                    self.restart()
            elif event.key in QUIT_KEYS:
                self.running = False

    def update(self, elapsed_ms):
        """Run every engine step that came due during the last frame."""
        for _ in range(self.timer.advance(elapsed_ms)):
            self.snapshot = self.engine.step()
            if self.snapshot.state is GameState.GAME_OVER:
                self.timer.stop()
                break

    def draw_text(self, text, pos, color=WHITE, font=None, center=False):
        """Draw text on screen."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        if center:
            text_rect = text_surface.get_rect(center=pos)
        else:
            text_rect = text_surface.get_rect(topleft=pos)
        self.screen.blit(text_surface, text_rect)

    def draw_cell(self, cell, color):
        tile = self.engine.grid.tile
        px, py = self.engine.grid.cell_center(cell)
        # 2px smaller than a tile so neighbouring cells stay visually apart
        rect = pygame.Rect(0, 0, tile - 2, tile - 2)
        rect.center = (px, py)
        pygame.draw.rect(self.screen, color, rect)

    def draw(self):
        self.screen.fill(BG_COLOR)

        snapshot = self.snapshot
        if snapshot.food is not None:
            self.draw_cell(snapshot.food, FOOD_COLOR)
        for i, cell in enumerate(snapshot.snake):
            self.draw_cell(cell, HEAD_COLOR if i == 0 else BODY_COLOR)

        self.draw_text(f"Score: {snapshot.score}", (8, 6))
        self.draw_text("Arrows to move. Space to restart.", (8, 28), GREY, self.small_font)

        if snapshot.state is GameState.GAME_OVER:
            center_x = self.screen.get_width() // 2
            center_y = self.screen.get_height() // 2
            self.draw_text("GAME OVER", (center_x, center_y - 20), RED, center=True)
            self.draw_text(
                f"Final Score: {snapshot.score}", (center_x, center_y + 10), WHITE, center=True
            )
            self.draw_text(
                "Press Space to restart", (center_x, center_y + 40), GREY, self.small_font, center=True
            )

    def run(self):
        """Main game loop."""
        self.restart()
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                elapsed_ms = self.clock.tick(FPS)
                self.update(elapsed_ms)

                self.draw()
                pygame.display.flip()
        finally:
            self.cleanup()

    def cleanup(self):
        """Stop ticking and close the window."""
        self.running = False
        self.timer.stop()
        logger.info("Closing game with score %d.", self.engine.score)
        pygame.quit()
