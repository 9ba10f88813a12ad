"""
Tests for the fixed-interval step timer.
"""

import pytest

from gridsnake.timer import StepTimer


class TestStepTimer:

    def test_inactive_until_started(self):
        timer = StepTimer(130)
        assert timer.active is False
        assert timer.advance(1000) == 0

    def test_one_step_per_interval(self):
        timer = StepTimer(130)
        timer.start()
        assert timer.advance(129) == 0
        assert timer.advance(1) == 1
        assert timer.advance(260) == 2

    def test_remainder_carries_over(self):
        timer = StepTimer(130)
        timer.start()
        assert timer.advance(200) == 1
        assert timer.accumulated_ms == 70
        assert timer.advance(60) == 1
        assert timer.accumulated_ms == 0

    def test_backlog_is_capped(self):
        """A long stall runs at most max_steps and drops the rest."""
        timer = StepTimer(100, max_steps=5)
        timer.start()
        assert timer.advance(1000) == 5
        assert timer.advance(0) == 0

    def test_stop_halts_ticks(self):
        timer = StepTimer(100)
        timer.start()
        timer.stop()
        assert timer.active is False
        assert timer.advance(500) == 0

    def test_start_discards_previous_backlog(self):
        """Restarting never inherits time from the previous round."""
        timer = StepTimer(100)
        timer.start()
        timer.advance(90)
        timer.start()
        assert timer.advance(20) == 0

    @pytest.mark.parametrize("interval", [0, -5])
    def test_rejects_non_positive_interval(self, interval):
        with pytest.raises(ValueError):
            StepTimer(interval)
