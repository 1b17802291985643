"""
tests/test_history.py - Tests for repeated-configuration detection.
"""

import pytest

from lifegrid.engine.grid import Cell, CellState, Grid, Team
from lifegrid.engine.history import HistoryTracker, canonical_key


def single(row, col, team=None, shape=(3, 3)):
    grid = Grid(*shape)
    grid.set(row, col, Cell(CellState.ALIVE, team))
    return grid


class TestObserve:
    """Tests for HistoryTracker.observe."""

    def test_first_sighting_is_new(self):
        tracker = HistoryTracker()
        assert tracker.observe(single(0, 0)) is False
        assert len(tracker) == 1

    def test_repeat_is_reported(self):
        tracker = HistoryTracker()
        tracker.observe(single(0, 0))
        tracker.observe(single(1, 1))
        assert tracker.observe(single(0, 0)) is True

    def test_team_participates(self):
        """Same states with a different owner is a different configuration."""
        tracker = HistoryTracker()
        tracker.observe(single(0, 0, Team.BLUE))
        assert tracker.observe(single(0, 0, Team.RED)) is False

    def test_shape_participates(self):
        assert canonical_key(Grid(2, 3)) != canonical_key(Grid(3, 2))

    def test_seen_does_not_record(self):
        tracker = HistoryTracker()
        assert tracker.seen(single(0, 0)) is False
        assert len(tracker) == 0

    def test_reset_forgets_everything(self):
        tracker = HistoryTracker()
        tracker.observe(single(0, 0))
        tracker.reset()
        assert len(tracker) == 0
        assert tracker.observe(single(0, 0)) is False


class TestWindow:
    """Tests for the bounded history window."""

    def test_old_generations_fall_out(self):
        tracker = HistoryTracker(window=2)
        tracker.observe(single(0, 0))
        tracker.observe(single(1, 1))
        tracker.observe(single(2, 2))
        assert len(tracker) == 2
        assert tracker.observe(single(0, 0)) is False

    def test_recent_generation_still_detected(self):
        tracker = HistoryTracker(window=2)
        tracker.observe(single(0, 0))
        tracker.observe(single(1, 1))
        assert tracker.observe(single(0, 0)) is True

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            HistoryTracker(window=0)
