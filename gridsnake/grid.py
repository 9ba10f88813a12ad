import numpy as np

from .config import COLS, ROWS, TILE, FREE_CELL_SAMPLE_RATIO, MAX_SAMPLE_ATTEMPTS


class Grid:
    """Discrete playfield geometry: bounds, pixel mapping and free-cell lookup."""

    def __init__(self, cols=COLS, rows=ROWS, tile=TILE):
        self.cols = cols
        self.rows = rows
        self.tile = tile

    @property
    def capacity(self):
        return self.cols * self.rows

    def in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell_center(self, cell):
        """Convert a grid cell to the pixel center of its tile, e.g. (0, 0) -> (8, 8)."""
        x, y = cell
        return (x * self.tile + self.tile // 2, y * self.tile + self.tile // 2)

    def random_free_cell(self, occupied, rng):
        """Pick a uniformly random cell that is not in ``occupied``.

        While the board is mostly empty, random cells are drawn until one is
        free (at most MAX_SAMPLE_ATTEMPTS tries). On a crowded board, or when
        sampling gives up, the free cells are enumerated from an occupancy mask
        and one is chosen directly, so the call always terminates.

        Returns None when every cell is occupied.
        """
        occupied = set(occupied)
        if len(occupied) < self.capacity * FREE_CELL_SAMPLE_RATIO:
            for _ in range(MAX_SAMPLE_ATTEMPTS):
                cell = (int(rng.integers(self.cols)), int(rng.integers(self.rows)))
                if cell not in occupied:
                    return cell

        free = self.free_cells(occupied)
        if len(free) == 0:
            return None
        y, x = free[rng.integers(len(free))]
        return (int(x), int(y))

    def free_cells(self, occupied):
        """Return an (n, 2) array of (row, col) indices of unoccupied cells."""
        mask = np.ones((self.rows, self.cols), dtype=bool)
        for cell in occupied:
            if self.in_bounds(cell):
                x, y = cell
                mask[y, x] = False
        return np.argwhere(mask)
