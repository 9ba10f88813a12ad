from .config import TICK_INTERVAL_MS, MAX_STEPS_PER_FRAME


class StepTimer:
    """Fixed-interval tick source fed with elapsed frame time.

    The game loop passes the milliseconds returned by ``clock.tick()`` to
    :meth:`advance` and runs one engine step per tick it reports. Stopping
    the timer freezes the game; starting it again drops any backlog, so a
    restart never inherits ticks from the previous round.
    """

    def __init__(self, interval_ms=TICK_INTERVAL_MS, max_steps=MAX_STEPS_PER_FRAME):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}.")
        self.interval_ms = interval_ms
        self.max_steps = max_steps
        self.accumulated_ms = 0
        self.active = False

    def start(self):
        self.accumulated_ms = 0
        self.active = True

    def stop(self):
        self.accumulated_ms = 0
        self.active = False

    def advance(self, elapsed_ms):
        """Add elapsed time and return how many steps are due."""
        if not self.active:
            return 0
        self.accumulated_ms += elapsed_ms
        steps, self.accumulated_ms = divmod(self.accumulated_ms, self.interval_ms)
        if steps > self.max_steps:
            steps = self.max_steps
        return int(steps)
