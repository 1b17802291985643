"""
tests/test_visualization.py - Tests for the rendering helpers.
"""

import numpy as np

from lifegrid.engine.grid import Cell, CellState, Grid, Team
from lifegrid.engine.placement import project
from lifegrid.utils.patterns import get_all_patterns, get_pattern
from lifegrid.utils.visualization import (
    FADE_ALPHA,
    PREVIEW_ALPHA,
    create_animation,
    grid_to_rgba,
    render_grid,
    visualize_pattern_grid,
)


class TestGridToRgba:
    """Tests for grid_to_rgba."""

    def test_dead_cells_are_transparent(self):
        image = grid_to_rgba(Grid(2, 3))
        assert image.shape == (2, 3, 4)
        assert np.all(image[..., 3] == 0.0)

    def test_team_colors(self):
        grid = Grid(1, 2)
        grid.set(0, 0, Cell(CellState.ALIVE, Team.BLUE))
        grid.set(0, 1, Cell(CellState.ALIVE, Team.RED))
        image = grid_to_rgba(grid)
        assert tuple(image[0, 0, :3]) == (0.0, 0.0, 1.0)
        assert tuple(image[0, 1, :3]) == (1.0, 0.0, 0.0)
        assert np.all(image[..., 3] == 1.0)

    def test_preview_is_translucent(self):
        preview = project(get_pattern("point"), 3, 3, 1, 1)
        image = grid_to_rgba(Grid(3, 3), preview=preview)
        assert image[1, 1, 3] == PREVIEW_ALPHA

    def test_newborn_cells_fade_in(self):
        previous = Grid(1, 2)
        previous.set(0, 1, Cell(CellState.ALIVE))
        current = Grid(1, 2)
        current.set(0, 0, Cell(CellState.ALIVE))
        image = grid_to_rgba(current, previous=previous)
        assert image[0, 0, 3] == FADE_ALPHA
        assert image[0, 1, 3] == 1.0 - FADE_ALPHA


class TestFigures:
    """Figures are written to disk."""

    def test_render_grid(self, tmp_path):
        path = tmp_path / "grid.png"
        render_grid(project(get_pattern("glider"), 6, 6, 0, 0), save_path=path)
        assert path.exists()

    def test_pattern_overview(self, tmp_path):
        path = tmp_path / "stables.png"
        visualize_pattern_grid(get_all_patterns()["stables"], save_path=path)
        assert path.exists()

    def test_animation(self, tmp_path):
        path = tmp_path / "run.gif"
        frames = [project(get_pattern("blinker"), 5, 5, 2, 1)]
        frames.append(project(np.ones((3, 1)), 5, 5, 1, 2))
        create_animation(frames, save_path=str(path), fps=2)
        assert path.exists()
