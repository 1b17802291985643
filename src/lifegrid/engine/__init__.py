"""Grid, transition, placement, history and the simulation controller."""

from .grid import Cell, CellState, Grid, Team
from .game_of_life import GameOfLife, count_neighbors, newborn_teams
from .placement import clamp_anchor, merge, project
from .history import HistoryTracker
from .events import EventSink, LoggingEventSink, NullEventSink, RecordingEventSink
from .simulation import RunState, Simulation, StepResult, create

__all__ = [
    'Cell',
    'CellState',
    'Grid',
    'Team',
    'GameOfLife',
    'count_neighbors',
    'newborn_teams',
    'clamp_anchor',
    'merge',
    'project',
    'HistoryTracker',
    'EventSink',
    'LoggingEventSink',
    'NullEventSink',
    'RecordingEventSink',
    'RunState',
    'Simulation',
    'StepResult',
    'create',
]
