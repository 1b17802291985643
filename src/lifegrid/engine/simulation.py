"""Simulation controller: owns the grid, generation counter and history."""
import logging
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple

import numpy as np

from ..evaluation.metrics import team_counts
from ..utils.patterns import DEFAULT_PATTERN, get_pattern
from .events import EventSink, LoggingEventSink
from .game_of_life import GameOfLife
from .grid import Grid, Team
from .history import HistoryTracker
from .placement import merge, project

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = (30, 100)
DEFAULT_DENSITY = 0.3


class RunState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'


class StepResult(NamedTuple):
    grid: Grid
    generation: int
    done: bool


class Simulation:
    """
    Facade exposing step/reset/seed/stamp operations to a host application.

    The host decides when to call ``step``; ``start``/``stop`` only track
    whether it intends to keep advancing. Grid dimensions and team mode are
    fixed for the lifetime of the simulation.
    """

    def __init__(self,
                 rows: int = DEFAULT_GRID_SIZE[0],
                 cols: int = DEFAULT_GRID_SIZE[1],
                 team_mode: bool = False,
                 rng: Optional[np.random.Generator] = None,
                 sink: Optional[EventSink] = None,
                 history_window: Optional[int] = None):
        """
        Create a simulation with an all-dead grid.

        Args:
            rows: Grid height
            cols: Grid width
            team_mode: Enable the two-team conquest rule
            rng: Random generator for seeding and team tie-breaks
            sink: Receiver for lifecycle events, logs at DEBUG by default
            history_window: Keep only this many generations for cycle detection
        """
        self.rows = rows
        self.cols = cols
        self.team_mode = team_mode
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sink = sink if sink is not None else LoggingEventSink()
        self.engine = GameOfLife(self.rng)
        self.history = HistoryTracker(history_window)
        self.reset()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def done(self) -> bool:
        return self._done

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is RunState.RUNNING

    def _fresh_start(self, grid: Grid) -> None:
        self._grid = grid
        self._generation = 0
        self._done = False
        self.history.reset()

    def reset(self) -> Grid:
        """Clear the grid and history and go idle."""
        self._fresh_start(Grid(self.rows, self.cols))
        self._state = RunState.IDLE
        self.sink.emit('reset', rows=self.rows, cols=self.cols)
        return self.snapshot()

    def seed_random(self, density: float = DEFAULT_DENSITY) -> Grid:
        """Fill the grid at random, each cell alive with probability ``density``."""
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Density must be within [0, 1], got {density}")

        alive = self.rng.random(self.shape) < density
        team = None
        if self.team_mode:
            team = np.where(self.rng.random(self.shape) < 0.5, Team.BLUE, Team.RED)
        self._fresh_start(Grid.from_array(alive, team))
        self.sink.emit('seeded', density=density, alive=self._grid.alive_count())
        return self.snapshot()

    def _stamp_team(self, team: Optional[Team]) -> Optional[Team]:
        if not self.team_mode:
            return None
        return Team(team) if team is not None else Team.BLUE

    def preview(self, row: int, col: int,
                pattern_key: str = DEFAULT_PATTERN,
                team: Optional[Team] = None) -> Grid:
        """Cells that ``stamp`` would turn alive at this anchor; state is untouched."""
        pattern = get_pattern(pattern_key)
        return project(pattern, self.rows, self.cols, row, col, self._stamp_team(team))

    def stamp(self, row: int, col: int,
              pattern_key: str = DEFAULT_PATTERN,
              team: Optional[Team] = None) -> Grid:
        """Stamp a pattern onto the grid; generation and history are kept."""
        overlay = self.preview(row, col, pattern_key, team)
        self._grid = merge(overlay, self._grid)
        self.sink.emit('pattern_placed', pattern=pattern_key, row=row, col=col,
                       team=self._stamp_team(team))
        return self.snapshot()

    def step(self) -> StepResult:
        """Advance one generation unless a repeat has already been detected."""
        if self._done:
            return StepResult(self.snapshot(), self._generation, True)

        # The seed counts as generation 0 so a return to it ends the run.
        if len(self.history) == 0:
            self.history.observe(self._grid)

        self.sink.emit('generation_started', generation=self._generation + 1)
        self._grid = self.engine.step(self._grid, self.team_mode)
        self._generation += 1
        self._done = self.history.observe(self._grid)
        self.sink.emit('generation_ended', generation=self._generation,
                       alive=self._grid.alive_count())

        if self._done:
            self._state = RunState.IDLE
            self.sink.emit('cycle_detected', generation=self._generation)
            logger.info("Repeated configuration at generation %d", self._generation)
        return StepResult(self.snapshot(), self._generation, self._done)

    def start(self) -> None:
        if self._done:
            logger.warning("Starting a finished simulation at generation %d; "
                           "reset or reseed to begin a fresh run", self._generation)
            self._done = False
        self._state = RunState.RUNNING
        self.sink.emit('started', generation=self._generation)

    def stop(self) -> None:
        self._state = RunState.IDLE
        self.sink.emit('stopped', generation=self._generation)

    def snapshot(self) -> Grid:
        """Return a copy of the current grid."""
        return self._grid.copy()

    def population(self) -> int:
        return self._grid.alive_count()

    def team_scores(self) -> Dict[Team, int]:
        """Alive cells per team."""
        return team_counts(self._grid)


def create(rows: int = DEFAULT_GRID_SIZE[0],
           cols: int = DEFAULT_GRID_SIZE[1],
           team_mode: bool = False,
           seed: Optional[int] = None,
           **kwargs) -> Simulation:
    """Build a Simulation whose randomness is driven by ``seed``."""
    return Simulation(rows, cols, team_mode, rng=np.random.default_rng(seed), **kwargs)
