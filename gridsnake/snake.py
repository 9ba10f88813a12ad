from collections import deque
from enum import Enum

from .config import INITIAL_LENGTH


class Direction(Enum):
    """Grid headings as (dx, dy) offsets. y grows downwards."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return Direction((-self.dx, -self.dy))


def is_opposite(a, b):
    """True if ``a`` points exactly against ``b`` (left/right, up/down)."""
    return a.dx == -b.dx and a.dy == -b.dy


class Snake:
    """Snake body on the grid: a deque of cells, head first, tail last."""

    def __init__(self, cols, rows):
        self.cols = cols
        self.rows = rows
        self.reset()

    def reset(self):
        """Lay the snake out horizontally around the grid center, facing right."""
        center_x = self.cols // 2
        center_y = self.rows // 2
        self.segments = deque(
            (center_x - i, center_y) for i in range(INITIAL_LENGTH)
        )

    def place(self, cells):
        self.segments = deque(cells)

    @property
    def head(self):
        return self.segments[0]

    @property
    def tail(self):
        return self.segments[-1]

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __contains__(self, cell):
        return cell in self.segments

    def next_head(self, direction):
        x, y = self.head
        return (x + direction.dx, y + direction.dy)

    def check_self_collision(self, cell, growing):
        """Check if moving the head onto ``cell`` runs into the body.

        The tail leaves its cell during a plain move, so it only counts as
        body when the snake grows this step.
        """
        body = set(self.segments)
        if not growing:
            body.discard(self.tail)
        return cell in body

    def move_to(self, cell, grow=False):
        """Push a new head; drop the tail unless growing."""
        self.segments.appendleft(cell)
        if not grow:
            self.segments.pop()
