"""
Visualization tools for grid snapshots
"""
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.colors import to_rgb
from typing import Dict, List, Optional

from ..engine.grid import Grid, Team
from ..evaluation.metrics import lineage


TEAM_COLORS = {
    Team.BLUE: 'blue',
    Team.RED: 'red',
}
DEFAULT_ALIVE_COLOR = '#007EA6'
PREVIEW_ALPHA = 0.25
FADE_ALPHA = 0.6


def grid_to_rgba(grid: Grid,
                 preview: Optional[Grid] = None,
                 previous: Optional[Grid] = None) -> np.ndarray:
    """
    Convert a grid into an RGBA image.

    Args:
        grid: Snapshot to draw
        preview: Projected stamp drawn translucent on top (hover preview)
        previous: Snapshot before the last step; newborn cells are faded
            in and cells that just died fade out

    Returns:
        Float array of shape (H, W, 4)
    """
    h, w = grid.shape
    image = np.ones((h, w, 4), dtype=float)
    image[..., 3] = 0.0

    colors = {0: to_rgb(DEFAULT_ALIVE_COLOR)}
    colors.update({int(team): to_rgb(color) for team, color in TEAM_COLORS.items()})

    alive = grid.state == 1
    for team_value, rgb in colors.items():
        mask = alive & (grid.team == team_value)
        image[mask, :3] = rgb
        image[mask, 3] = 1.0

    if previous is not None:
        changes = lineage(previous, grid)
        image[changes['born'], 3] = FADE_ALPHA
        died = changes['died']
        for team_value, rgb in colors.items():
            mask = died & (previous.team == team_value)
            image[mask, :3] = rgb
        image[died, 3] = 1.0 - FADE_ALPHA

    if preview is not None:
        for team_value, rgb in colors.items():
            mask = (preview.state == 1) & (preview.team == team_value)
            image[mask, :3] = rgb
            image[mask, 3] = PREVIEW_ALPHA

    return image


def _draw_cell_lines(ax, h: int, w: int, show_grid: bool) -> None:
    if show_grid:
        ax.set_xticks(np.arange(-0.5, w, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, h, 1), minor=True)
        ax.grid(which='minor', color='gray', linestyle='-', linewidth=0.5, alpha=0.3)

    ax.set_xticks([])
    ax.set_yticks([])


def render_grid(grid: Grid,
                title: str = "Game of Life",
                preview: Optional[Grid] = None,
                previous: Optional[Grid] = None,
                save_path: Optional[str] = None,
                figsize: tuple = (12, 4),
                show_grid: bool = True) -> None:
    """
    Render a single snapshot with team colors.

    Args:
        grid: Snapshot to draw
        title: Plot title
        preview: Hover projection drawn translucent
        previous: Previous snapshot, enables fade effects
        save_path: Path to save figure, None for display only
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)

    ax.imshow(grid_to_rgba(grid, preview, previous), interpolation='nearest')
    ax.set_title(title, fontsize=16, pad=10)
    _draw_cell_lines(ax, *grid.shape, show_grid)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def create_animation(frames: List[Grid],
                     title: str = "Game of Life",
                     save_path: Optional[str] = None,
                     fps: int = 10,
                     figsize: tuple = (12, 4),
                     show_grid: bool = True) -> None:
    """
    Create animated GIF from a list of snapshots.

    Args:
        frames: Consecutive snapshots
        title: Title prefix
        save_path: Path to save GIF file
        fps: Frames per second
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)

    im = ax.imshow(grid_to_rgba(frames[0]), interpolation='nearest', animated=True)
    _draw_cell_lines(ax, *frames[0].shape, show_grid)
    caption = ax.set_title(f"{title} - Generation 0", fontsize=16)

    def update(frame):
        previous = frames[frame - 1] if frame > 0 else None
        im.set_array(grid_to_rgba(frames[frame], previous=previous))
        caption.set_text(f"{title} - Generation {frame}")
        return [im, caption]

    anim = FuncAnimation(fig, update, frames=len(frames),
                         interval=1000 // fps, blit=True, repeat=True)

    if save_path:
        writer = PillowWriter(fps=fps)
        anim.save(save_path, writer=writer)
        print(f"Saved animation to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def visualize_pattern_grid(patterns_dict: Dict[str, np.ndarray],
                           save_path: Optional[str] = None,
                           figsize: tuple = (15, 10),
                           show_grid: bool = True) -> None:
    """
    Visualize multiple patterns in a grid.

    Args:
        patterns_dict: Dictionary of {name: pattern_array}
        save_path: Path to save figure
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    num_patterns = len(patterns_dict)
    ncols = min(4, num_patterns)
    nrows = (num_patterns + ncols - 1) // ncols

    fig, axes = plt.subplots(nrows, ncols, figsize=figsize)
    axes = np.atleast_1d(axes).flatten()

    for ax, (name, pattern) in zip(axes, patterns_dict.items()):
        cells = np.asarray(getattr(pattern, 'cells', pattern))
        ax.imshow(cells, cmap='binary', interpolation='nearest')
        ax.set_title(name, fontsize=12)
        _draw_cell_lines(ax, *cells.shape, show_grid)

    for ax in axes[num_patterns:]:
        ax.axis('off')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved pattern grid to {save_path}")
    else:
        plt.show()

    plt.close(fig)
