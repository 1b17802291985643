"""Grid of binary cells with an optional team tag per cell."""
from enum import IntEnum
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .errors import DimensionMismatch, OutOfBounds


class CellState(IntEnum):
    DEAD = 0
    ALIVE = 1


class Team(IntEnum):
    """Ownership tag used by the team conquest variant."""
    BLUE = 1
    RED = 2


# Value stored in the team array for cells without an owner.
NO_TEAM = 0


class Cell(NamedTuple):
    state: CellState = CellState.DEAD
    team: Optional[Team] = None

    @property
    def alive(self) -> bool:
        return self.state == CellState.ALIVE


class Grid:
    """
    Fixed-size rectangular grid.

    Cell states live in a ``uint8`` array (0 dead, 1 alive) and team tags in a
    parallel ``uint8`` array (0 none, 1 blue, 2 red). Both arrays always share
    the shape ``(rows, cols)``.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got ({rows}, {cols})")
        self.state = np.zeros((rows, cols), dtype=np.uint8)
        self.team = np.zeros((rows, cols), dtype=np.uint8)

    @classmethod
    def from_array(cls, state: np.ndarray, team: Optional[np.ndarray] = None) -> "Grid":
        """Build a grid from a 2D state array and an optional team array."""
        state = np.asarray(state)
        if state.ndim != 2:
            raise ValueError(f"Expected a 2D state array, got shape {state.shape}")
        grid = cls(*state.shape)
        grid.state[...] = (state != 0)
        if team is not None:
            team = np.asarray(team)
            if team.shape != state.shape:
                raise DimensionMismatch(state.shape, team.shape)
            grid.team[...] = np.where(grid.state == 1, team, NO_TEAM)
        return grid

    @property
    def rows(self) -> int:
        return self.state.shape[0]

    @property
    def cols(self) -> int:
        return self.state.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.state.shape

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfBounds(row, col, self.shape)

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        team = int(self.team[row, col])
        return Cell(CellState(int(self.state[row, col])), Team(team) if team else None)

    def set(self, row: int, col: int, cell: Cell) -> None:
        self._check(row, col)
        state = CellState(cell.state)
        self.state[row, col] = state
        # Dead cells never keep a team tag.
        if state == CellState.ALIVE and cell.team is not None:
            self.team[row, col] = Team(cell.team)
        else:
            self.team[row, col] = NO_TEAM

    def __getitem__(self, index) -> Cell:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index, cell: Cell) -> None:
        row, col = index
        self.set(row, col, cell)

    def copy(self) -> "Grid":
        grid = Grid(*self.shape)
        grid.state[...] = self.state
        grid.team[...] = self.team
        return grid

    def alive_count(self) -> int:
        return int(self.state.sum())

    def to_array(self) -> np.ndarray:
        """Return a copy of the state array."""
        return self.state.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.shape == other.shape
                and np.array_equal(self.state, other.state)
                and np.array_equal(self.team, other.team))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, alive={self.alive_count()})"
