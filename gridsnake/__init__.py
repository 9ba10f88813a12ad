"""Package initializer for gridsnake.

The simulation core is exported directly. The pygame front end is exported
lazily so that::

	from gridsnake import SnakeGame

works without importing pygame for code that only drives the engine
(tests, scripted runs).
"""

from .engine import EndReason, GameSnapshot, GameState, GameStepEngine
from .grid import Grid
from .snake import Direction, Snake, is_opposite
from .timer import StepTimer

__version__ = "0.1"

__all__ = [
	"Direction",
	"EndReason",
	"GameSnapshot",
	"GameState",
	"GameStepEngine",
	"Grid",
	"Snake",
	"SnakeGame",
	"StepTimer",
	"is_opposite",
]

def __getattr__(name: str):
	if name == "SnakeGame":
		from .utils import SnakeGame

		return SnakeGame
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
