"""Game of Life simulation engine with prefab stamps and team conquest."""

from .engine import (
    Cell,
    CellState,
    GameOfLife,
    Grid,
    HistoryTracker,
    RunState,
    Simulation,
    StepResult,
    Team,
    create,
)
from .engine.errors import (
    DimensionMismatch,
    LifeGridError,
    OutOfBounds,
    PatternTooLarge,
    UnknownPattern,
)
from .utils.patterns import Pattern, get_pattern, pattern_keys

__version__ = '0.1.0'

__all__ = [
    'Cell',
    'CellState',
    'GameOfLife',
    'Grid',
    'HistoryTracker',
    'RunState',
    'Simulation',
    'StepResult',
    'Team',
    'create',
    'DimensionMismatch',
    'LifeGridError',
    'OutOfBounds',
    'PatternTooLarge',
    'UnknownPattern',
    'Pattern',
    'get_pattern',
    'pattern_keys',
]
