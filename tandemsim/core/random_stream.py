"""Pre-computed uniform samples consumed in strict order.

The simulator never generates randomness itself. A RandomStream wraps a
finite list of values in [0, 1) and hands them out one at a time; running
out of values is the normal way a run ends, signalled by
RandomStreamExhausted.
"""

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class RandomStreamExhausted(Exception):
    """Raised when a draw is requested and no samples remain."""

    def __init__(self, consumed: int):
        super().__init__(f"Random stream exhausted after {consumed} samples")
        self.consumed = consumed


class RandomStream:
    """Cursor over a fixed sequence of uniform samples.

    Each value is read exactly once, in index order. The cursor only moves
    forward.

    Attributes:
        index: Number of samples consumed so far.
    """

    __slots__ = ("_values", "_index")

    def __init__(self, values: Iterable[float] = ()):
        self._values: list[float] = [float(v) for v in values]
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def next(self) -> float:
        """Return the next unread sample and advance the cursor."""
        if self._index >= len(self._values):
            raise RandomStreamExhausted(self._index)
        value = self._values[self._index]
        self._index += 1
        return value

    def uniform(self, low: float, high: float) -> float:
        """Map the next sample onto [low, high)."""
        u = self.next()
        return low + (high - low) * u

    def __repr__(self) -> str:
        return f"RandomStream(index={self._index}, size={len(self._values)})"
