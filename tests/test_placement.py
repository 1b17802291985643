"""
tests/test_placement.py - Tests for clamped projection and merge.
"""

import numpy as np
import pytest

from lifegrid.engine.errors import DimensionMismatch, OutOfBounds, PatternTooLarge
from lifegrid.engine.grid import Cell, CellState, Grid, Team
from lifegrid.engine.placement import clamp_anchor, merge, project
from lifegrid.utils.patterns import GLIDER, get_pattern


class TestProject:
    """Tests for project."""

    def test_pattern_lands_at_anchor(self):
        grid = project(GLIDER, 8, 8, 2, 3)
        assert np.array_equal(grid.state[2:5, 3:6], GLIDER)
        assert grid.alive_count() == GLIDER.sum()

    def test_bottom_right_anchor_is_clamped(self):
        """A stamp at the far corner slides back to stay inside the grid."""
        rows, cols = 10, 12
        grid = project(GLIDER, rows, cols, rows - 1, cols - 1)
        assert grid.shape == (rows, cols)
        assert np.array_equal(grid.state[rows - 3:, cols - 3:], GLIDER)
        assert grid.alive_count() == GLIDER.sum()

    def test_clamps_each_axis_independently(self):
        assert clamp_anchor((3, 3), (10, 10), (9, 2)) == (7, 2)
        assert clamp_anchor((3, 3), (10, 10), (2, 9)) == (2, 7)
        assert clamp_anchor((3, 3), (10, 10), (4, 4)) == (4, 4)

    def test_pattern_too_large(self):
        gun = get_pattern("gosper_glider_gun")
        with pytest.raises(PatternTooLarge):
            project(gun, 11, 22, 0, 0)

    def test_pattern_exactly_grid_sized(self):
        grid = project(GLIDER, 3, 3, 2, 2)
        assert np.array_equal(grid.state, GLIDER)

    def test_negative_anchor_rejected(self):
        with pytest.raises(OutOfBounds):
            project(GLIDER, 8, 8, -1, 0)

    def test_team_applied_to_alive_cells_only(self):
        grid = project(get_pattern("blinker"), 5, 5, 2, 1, team=Team.RED)
        assert grid.get(2, 2) == Cell(CellState.ALIVE, Team.RED)
        assert grid.get(1, 2).team is None
        assert int(np.sum(grid.team == Team.RED)) == 3

    def test_accepts_plain_arrays(self):
        grid = project(np.array([[True, False, True]]), 2, 4, 0, 0)
        assert grid.state.tolist() == [[1, 0, 1, 0], [0, 0, 0, 0]]


class TestMerge:
    """Tests for merge."""

    def test_overlay_alive_cell_wins_and_base_is_kept(self):
        """Merging never turns a live cell dead."""
        base = Grid.from_array(np.ones((5, 5)))
        base.set(2, 2, Cell(CellState.DEAD))
        overlay = Grid(5, 5)
        overlay.set(2, 2, Cell(CellState.ALIVE))

        merged = merge(overlay, base)
        assert merged.alive_count() == 25

    def test_dead_overlay_does_not_erase(self):
        base = Grid.from_array(np.ones((3, 3)))
        merged = merge(Grid(3, 3), base)
        assert merged == base

    def test_overlay_team_replaces_base_team(self):
        base = Grid(2, 2)
        base.set(0, 0, Cell(CellState.ALIVE, Team.RED))
        overlay = Grid(2, 2)
        overlay.set(0, 0, Cell(CellState.ALIVE, Team.BLUE))
        assert merge(overlay, base).get(0, 0).team == Team.BLUE

    def test_inputs_are_not_mutated(self):
        base = Grid(3, 3)
        overlay = project(GLIDER, 3, 3, 0, 0)
        base_before = base.copy()
        overlay_before = overlay.copy()
        merge(overlay, base)
        assert base == base_before
        assert overlay == overlay_before

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch):
            merge(Grid(3, 3), Grid(3, 4))
