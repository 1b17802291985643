"""Conway's Game of Life transition with the optional team conquest rule."""
from typing import List, Optional, Tuple

import numpy as np

from .grid import Grid, NO_TEAM, Team


def count_neighbors(alive: np.ndarray) -> np.ndarray:
    """Count live Moore neighbors of every cell; cells past the edge count as dead."""
    h, w = alive.shape
    padded = np.pad(alive.astype(np.int16), 1, mode='constant')
    neighbors = np.zeros((h, w), dtype=np.int16)
    for di in [-1, 0, 1]:
        for dj in [-1, 0, 1]:
            if di == 0 and dj == 0:
                continue
            neighbors += padded[1 + di:1 + di + h, 1 + dj:1 + dj + w]
    return neighbors


def newborn_teams(blue: np.ndarray,
                  red: np.ndarray,
                  rng: np.random.Generator) -> np.ndarray:
    """
    Resolve the owner of newborn cells from their blue and red neighbor counts.

    The strict majority wins; ties are settled by an independent fair coin
    flip per cell.

    Args:
        blue: Blue live neighbor counts
        red: Red live neighbor counts
        rng: Random generator used for tie-breaks

    Returns:
        Array of team values (Team.BLUE or Team.RED) with the input shape
    """
    blue = np.asarray(blue)
    red = np.asarray(red)
    coin = rng.random(blue.shape) < 0.5
    return np.where(blue > red, Team.BLUE,
                    np.where(red > blue, Team.RED,
                             np.where(coin, Team.BLUE, Team.RED))).astype(np.uint8)


class GameOfLife:
    """Game of Life simulator with dead (non-wrapping) boundaries."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """Create simulator; rng drives team tie-breaks."""
        self.rng = rng if rng is not None else np.random.default_rng()

    def step(self, grid: Grid, team_mode: bool = False) -> Grid:
        """Compute the next generation; the input grid is never modified."""
        next_grid = Grid(*grid.shape)
        if grid.state.size == 0:
            return next_grid

        alive = grid.state == 1
        neighbors = count_neighbors(alive)

        born = ~alive & (neighbors == 3)
        survives = alive & ((neighbors == 2) | (neighbors == 3))
        next_grid.state[...] = born | survives

        if team_mode:
            blue, red = self._count_team_neighbors(grid)
            teams = newborn_teams(blue, red, self.rng)
            next_grid.team[...] = np.where(born, teams,
                                           np.where(survives, grid.team, NO_TEAM))
        return next_grid

    def _count_team_neighbors(self, grid: Grid) -> Tuple[np.ndarray, np.ndarray]:
        alive = grid.state == 1
        blue = count_neighbors(alive & (grid.team == Team.BLUE))
        red = count_neighbors(alive & (grid.team == Team.RED))
        return blue, red

    def simulate(self, initial: Grid, num_steps: int, team_mode: bool = False) -> List[Grid]:
        """Simulate evolution for multiple steps and return the full trajectory."""
        trajectory = [initial.copy()]
        current = initial
        for _ in range(num_steps):
            current = self.step(current, team_mode)
            trajectory.append(current)
        return trajectory
