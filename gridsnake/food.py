from .config import SCORE_INCREMENT


class Food:
    """Single food cell and the points it is worth."""

    def __init__(self, grid, rng, score=SCORE_INCREMENT):
        self.grid = grid
        self.rng = rng
        self.score = score
        self.position = None

    def respawn(self, snake_segments):
        """Move the food to a random cell not covered by the snake.

        Leaves position as None when the snake covers the whole board.
        """
        self.position = self.grid.random_free_cell(snake_segments, self.rng)
        return self.position

    def place(self, cell):
        self.position = cell

    def check_collision(self, snake_head):
        """Check if the snake head lands on the food."""
        return self.position is not None and snake_head == self.position
