"""Predefined Game of Life patterns (prefabs) used to stamp the grid."""
from typing import Dict, List, NamedTuple

import numpy as np

from ..engine.errors import UnknownPattern


class Pattern(NamedTuple):
    """Immutable named rectangular stamp, 1 = alive and 0 = dead."""
    name: str
    cells: np.ndarray

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def shape(self):
        return self.cells.shape


def _frozen(rows) -> np.ndarray:
    cells = np.array(rows, dtype=np.uint8)
    assert cells.ndim == 2 and cells.shape[0] >= 1 and cells.shape[1] >= 1
    cells.setflags(write=False)
    return cells


# Default stamp
POINT = _frozen([
    [1]
])


# Still Lifes (period 1)
BLOCK = _frozen([
    [1, 1],
    [1, 1]
])

BEEHIVE = _frozen([
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 1, 0]
])

BOAT = _frozen([
    [1, 1, 0],
    [1, 0, 1],
    [0, 1, 0]
])

LOAF = _frozen([
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 0, 1],
    [0, 0, 1, 0]
])

BEEHIVE_WITH_TAIL = _frozen([
    [0, 1, 1, 0, 0, 0],
    [1, 0, 0, 1, 0, 0],
    [0, 1, 1, 0, 1, 0],
    [0, 0, 0, 0, 1, 0],
    [0, 0, 0, 0, 1, 1]
])

TABLE_ON_TABLE = _frozen([
    [1, 0, 0, 1],
    [1, 1, 1, 1],
    [0, 0, 0, 0],
    [1, 1, 1, 1],
    [1, 0, 0, 1]
])


# Oscillators (period 2)
BLINKER = _frozen([
    [1, 1, 1]
])

TOAD = _frozen([
    [0, 1, 1, 1],
    [1, 1, 1, 0]
])

BEACON = _frozen([
    [1, 1, 0, 0],
    [1, 1, 0, 0],
    [0, 0, 1, 1],
    [0, 0, 1, 1]
])


# Oscillators (period 3)
PULSAR = _frozen([
    [0, 0, 1, 1, 1, 0, 0, 0, 1, 1, 1, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 1],
    [0, 0, 1, 1, 1, 0, 0, 0, 1, 1, 1, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, 1, 1, 0, 0, 0, 1, 1, 1, 0, 0],
    [1, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, 1, 1, 0, 0, 0, 1, 1, 1, 0, 0]
])


# Oscillators (period 14)
TUMBLER = _frozen([
    [0, 1, 0, 0, 0, 0, 0, 1, 0],
    [1, 0, 1, 0, 0, 0, 1, 0, 1],
    [1, 0, 0, 1, 0, 1, 0, 0, 1],
    [0, 0, 1, 0, 0, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1, 0, 0]
])


# Oscillators (period 30)
# Queen bee bouncing between two blocks
QUEEN_BEE_SHUTTLE = _frozen([
    [0,0,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0],
    [0,0,0,0,0,0,0,1,0,1,0,0,0,0,0,0,0,0,0,0,0,0],
    [0,0,0,0,0,0,1,0,1,0,0,0,0,0,0,0,0,0,0,0,0,0],
    [1,1,0,0,0,1,0,0,1,0,0,0,0,0,0,0,0,0,0,0,1,1],
    [1,1,0,0,0,0,1,0,1,0,0,0,0,0,0,0,0,0,0,0,1,1],
    [0,0,0,0,0,0,0,1,0,1,0,0,0,0,0,0,0,0,0,0,0,0],
    [0,0,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0]
])


# Spaceships (period 4)
GLIDER = _frozen([
    [0, 1, 0],
    [0, 0, 1],
    [1, 1, 1]
])

LWSS = _frozen([
    [0, 1, 0, 0, 1],
    [1, 0, 0, 0, 0],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 0]
])


# Methuselahs (long-lived chaotic seeds)
R_PENTOMINO = _frozen([
    [0, 1, 1],
    [1, 1, 0],
    [0, 1, 0]
])

DIEHARD = _frozen([
    [0, 0, 0, 0, 0, 0, 1, 0],
    [1, 1, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 1, 1, 1]
])

ACORN = _frozen([
    [0, 1, 0, 0, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0],
    [1, 1, 0, 0, 1, 1, 1]
])


# Glider Gun (period 30)
# Gosper's Glider Gun - emits one glider every 30 generations
GOSPER_GLIDER_GUN = _frozen([
    [0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0],
    [0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,0,1,0,0,0,0,0,0,0,0,0,0,0],
    [0,0,0,0,0,0,0,0,0,0,0,0,1,1,0,0,0,0,0,0,1,1,0,0,0,0,0,0,0,0,0,0,0,0,1,1],
    [0,0,0,0,0,0,0,0,0,0,0,1,0,0,0,1,0,0,0,0,1,1,0,0,0,0,0,0,0,0,0,0,0,0,1,1],
    [1,1,0,0,0,0,0,0,0,0,1,0,0,0,0,0,1,0,0,0,1,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0],
    [1,1,0,0,0,0,0,0,0,0,1,0,0,0,1,0,1,1,0,0,0,0,1,0,1,0,0,0,0,0,0,0,0,0,0,0],
    [0,0,0,0,0,0,0,0,0,0,1,0,0,0,0,0,1,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0],
    [0,0,0,0,0,0,0,0,0,0,0,1,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0],
    [0,0,0,0,0,0,0,0,0,0,0,0,1,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0]
])


DEFAULT_PATTERN = 'point'

# Categories only matter for menus; lookups treat this as a flat mapping.
PATTERN_CATEGORIES = {
    'basic': {
        'point': POINT
    },
    'stables': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF,
        'beehive_with_tail': BEEHIVE_WITH_TAIL,
        'table_on_table': TABLE_ON_TABLE
    },
    'oscillators': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON,
        'pulsar': PULSAR,
        'tumbler': TUMBLER,
        'queen_bee_shuttle': QUEEN_BEE_SHUTTLE
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS
    },
    'methuselahs': {
        'r_pentomino': R_PENTOMINO,
        'diehard': DIEHARD,
        'acorn': ACORN
    },
    'guns': {
        'gosper_glider_gun': GOSPER_GLIDER_GUN
    }
}


def get_pattern(name: str) -> Pattern:
    """Return the pattern registered under name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return Pattern(name, category[name])

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]
    raise UnknownPattern(name, available)


def get_all_patterns() -> Dict[str, Dict[str, Pattern]]:
    """Return all available patterns organized by category."""
    return {
        category: {name: Pattern(name, cells) for name, cells in members.items()}
        for category, members in PATTERN_CATEGORIES.items()
    }


def pattern_keys() -> Dict[str, List[str]]:
    """Return pattern keys grouped by category, in menu order."""
    return {category: list(members) for category, members in PATTERN_CATEGORIES.items()}
