"""Pattern library and visualization helpers"""

from .patterns import Pattern, get_pattern, get_all_patterns, pattern_keys, PATTERN_CATEGORIES
from .visualization import (
    grid_to_rgba,
    render_grid,
    create_animation,
    visualize_pattern_grid
)

__all__ = [
    'Pattern',
    'get_pattern',
    'get_all_patterns',
    'pattern_keys',
    'PATTERN_CATEGORIES',
    'grid_to_rgba',
    'render_grid',
    'create_animation',
    'visualize_pattern_grid',
]
