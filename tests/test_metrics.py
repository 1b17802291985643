"""
tests/test_metrics.py - Tests for snapshot metrics and derived views.
"""

import numpy as np
import pytest

from lifegrid.engine.errors import DimensionMismatch
from lifegrid.engine.game_of_life import GameOfLife
from lifegrid.engine.grid import Cell, CellState, Grid, Team
from lifegrid.evaluation.metrics import (
    hamming_distance,
    leading_team,
    lineage,
    population,
    starving,
    team_counts,
)

BLINKER = [".....", ".....", ".OOO.", ".....", "....."]


class TestCounts:
    """Tests for population and team tallies."""

    def test_population(self, make_grid):
        assert population(make_grid(BLINKER)) == 3

    def test_team_counts_and_leader(self):
        grid = Grid(3, 3)
        grid.set(0, 0, Cell(CellState.ALIVE, Team.RED))
        grid.set(0, 1, Cell(CellState.ALIVE, Team.RED))
        grid.set(2, 2, Cell(CellState.ALIVE, Team.BLUE))
        grid.set(1, 1, Cell(CellState.ALIVE))
        assert team_counts(grid) == {Team.BLUE: 1, Team.RED: 2}
        assert leading_team(grid) is Team.RED

    def test_tie_has_no_leader(self):
        assert leading_team(Grid(2, 2)) is None


class TestHamming:
    """Tests for hamming_distance."""

    def test_identical(self, make_grid):
        grid = make_grid(BLINKER)
        assert hamming_distance(grid, grid.copy()) == 0.0

    def test_blinker_flip(self, make_grid):
        grid = make_grid(BLINKER)
        following = GameOfLife().step(grid)
        # Two ends die and two cells are born.
        assert hamming_distance(grid, following) == pytest.approx(4 / 25)

    def test_empty_grids(self):
        assert hamming_distance(Grid(0, 3), Grid(0, 3)) == 0.0

    def test_mismatch(self):
        with pytest.raises(DimensionMismatch):
            hamming_distance(Grid(2, 2), Grid(2, 3))


class TestLineage:
    """Tests for lineage between consecutive snapshots."""

    def test_blinker_lineage(self, make_grid):
        before = make_grid(BLINKER)
        after = GameOfLife().step(before)
        changes = lineage(before, after)
        assert sorted(zip(*np.nonzero(changes['born']))) == [(1, 2), (3, 2)]
        assert sorted(zip(*np.nonzero(changes['died']))) == [(2, 1), (2, 3)]
        assert list(zip(*np.nonzero(changes['survived']))) == [(2, 2)]


class TestStarving:
    """Tests for starving."""

    def test_blinker_ends_starve(self, make_grid):
        mask = starving(make_grid(BLINKER))
        assert sorted(zip(*np.nonzero(mask))) == [(2, 1), (2, 3)]

    def test_block_never_starves(self, make_grid):
        mask = starving(make_grid(["....", ".OO.", ".OO.", "...."]))
        assert not mask.any()
