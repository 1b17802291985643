"""Metrics and derived views computed from grid snapshots."""
from typing import Dict

import numpy as np

from ..engine.errors import DimensionMismatch
from ..engine.game_of_life import GameOfLife
from ..engine.grid import Grid, Team


def population(grid: Grid) -> int:
    """Return the number of alive cells."""
    return int(np.sum(grid.state == 1))


def team_counts(grid: Grid) -> Dict[Team, int]:
    """Return alive cells per team; untagged alive cells are not counted."""
    alive = grid.state == 1
    return {team: int(np.sum(alive & (grid.team == team))) for team in Team}


def leading_team(grid: Grid):
    """Return the team with more alive cells, or None on a tie."""
    counts = team_counts(grid)
    if counts[Team.BLUE] == counts[Team.RED]:
        return None
    return max(counts, key=counts.get)


def hamming_distance(before: Grid, after: Grid) -> float:
    """Return the fraction of cells whose state differs between two grids."""
    if before.shape != after.shape:
        raise DimensionMismatch(before.shape, after.shape)
    if before.state.size == 0:
        return 0.0
    return float(np.mean(before.state != after.state))


def lineage(before: Grid, after: Grid) -> Dict[str, np.ndarray]:
    """
    Compare two consecutive snapshots cell by cell.

    This is what a renderer needs for fade effects: cells that were just
    born or just died are drawn differently from long-lived ones.

    Args:
        before: Snapshot taken before a step
        after: Snapshot taken after the same step

    Returns:
        Dictionary of boolean masks 'born', 'died' and 'survived'
    """
    if before.shape != after.shape:
        raise DimensionMismatch(before.shape, after.shape)
    was_alive = before.state == 1
    is_alive = after.state == 1
    return {
        'born': ~was_alive & is_alive,
        'died': was_alive & ~is_alive,
        'survived': was_alive & is_alive,
    }


def starving(grid: Grid, engine: GameOfLife = None) -> np.ndarray:
    """Return a mask of alive cells that will die in the next generation."""
    engine = engine if engine is not None else GameOfLife()
    following = engine.step(grid)
    return (grid.state == 1) & (following.state == 0)
