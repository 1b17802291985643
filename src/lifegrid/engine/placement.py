"""Pattern placement: clamped projection of a stamp and pattern-wins merge."""
from typing import Optional, Tuple

import numpy as np

from .errors import DimensionMismatch, OutOfBounds, PatternTooLarge
from .grid import Grid, NO_TEAM, Team


def clamp_anchor(pattern_shape: Tuple[int, int],
                 grid_size: Tuple[int, int],
                 anchor: Tuple[int, int]) -> Tuple[int, int]:
    """
    Return the top-left corner where a pattern anchored at ``anchor`` lands.

    A pattern that would run off the bottom or right edge slides back so that
    its far edge sits on the last row/column of the grid.

    Args:
        pattern_shape: (height, width) of the pattern
        grid_size: (rows, cols) of the target grid
        anchor: Requested (row, col) of the pattern's top-left cell

    Returns:
        Effective (row, col) of the pattern's top-left cell
    """
    ph, pw = pattern_shape
    h, w = grid_size
    if ph > h or pw > w:
        raise PatternTooLarge(pattern_shape, grid_size)

    start_h, start_w = anchor
    if not (0 <= start_h < h and 0 <= start_w < w):
        raise OutOfBounds(start_h, start_w, grid_size)

    if start_h + ph > h:
        start_h = h - ph
    if start_w + pw > w:
        start_w = w - pw
    return start_h, start_w


def project(pattern: np.ndarray,
            grid_rows: int,
            grid_cols: int,
            anchor_row: int,
            anchor_col: int,
            team: Optional[Team] = None) -> Grid:
    """
    Place a pattern on an otherwise dead grid of the given size.

    The result holds exactly the cells that would turn alive if the pattern
    were stamped at the anchor, which also makes it the hover preview.

    Args:
        pattern: Pattern or 2D array, non-zero entries are alive
        grid_rows: Rows of the target grid
        grid_cols: Columns of the target grid
        anchor_row: Requested top row of the stamp
        anchor_col: Requested left column of the stamp
        team: Team assigned to every alive cell of the stamp

    Returns:
        New Grid of shape (grid_rows, grid_cols)
    """
    cells = np.asarray(getattr(pattern, "cells", pattern)) != 0
    ph, pw = cells.shape
    start_h, start_w = clamp_anchor((ph, pw), (grid_rows, grid_cols), (anchor_row, anchor_col))

    grid = Grid(grid_rows, grid_cols)
    grid.state[start_h:start_h + ph, start_w:start_w + pw] = cells
    if team is not None:
        grid.team[start_h:start_h + ph, start_w:start_w + pw] = np.where(cells, Team(team), NO_TEAM)
    return grid


def merge(overlay: Grid, base: Grid) -> Grid:
    """Combine two grids cell by cell; alive overlay cells win over the base."""
    if overlay.shape != base.shape:
        raise DimensionMismatch(overlay.shape, base.shape)

    alive = overlay.state == 1
    merged = Grid(*base.shape)
    merged.state[...] = np.where(alive, overlay.state, base.state)
    merged.team[...] = np.where(alive, overlay.team, base.team)
    return merged
