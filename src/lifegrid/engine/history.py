"""Generation history used to detect repeated configurations."""
import hashlib
from collections import Counter, deque
from typing import Optional

import numpy as np

from .grid import Grid


def canonical_key(grid: Grid) -> bytes:
    """Digest of the shape, state and team of every cell, in row-major order."""
    digest = hashlib.blake2b(digest_size=32)
    digest.update(np.asarray(grid.shape, dtype=np.int64).tobytes())
    digest.update(np.ascontiguousarray(grid.state).tobytes())
    digest.update(np.ascontiguousarray(grid.team).tobytes())
    return digest.digest()


class HistoryTracker:
    """
    Records one canonical key per observed generation.

    By default every generation since the last reset participates in the
    membership test. Passing ``window`` keeps only the most recent
    ``window`` generations instead.
    """

    def __init__(self, window: Optional[int] = None):
        if window is not None and window < 1:
            raise ValueError(f"History window must be positive, got {window}")
        self.window = window
        self._order = deque(maxlen=window)
        self._counts = Counter()

    def observe(self, grid: Grid) -> bool:
        """Record the grid and return True if it had already been seen."""
        key = canonical_key(grid)
        repeated = self._counts[key] > 0

        if self.window is not None and len(self._order) == self.window:
            evicted = self._order[0]
            self._counts[evicted] -= 1
            if self._counts[evicted] == 0:
                del self._counts[evicted]
        self._order.append(key)
        self._counts[key] += 1
        return repeated

    def seen(self, grid: Grid) -> bool:
        """Return True if the grid is in the history, without recording it."""
        return self._counts[canonical_key(grid)] > 0

    def reset(self) -> None:
        self._order.clear()
        self._counts.clear()

    def __len__(self) -> int:
        return len(self._order)
