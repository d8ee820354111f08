"""
Bounded position history for particle trails.
"""

from collections import deque
from typing import Iterator, List, Tuple

from .physics import Vec2


class TrailBuffer:
    """
    FIFO of the most recent positions.

    Index 0 is the oldest point. Pushing past ``max_length`` evicts from the
    old end.
    """

    def __init__(self, max_length: int, start: Vec2 = None):
        if max_length < 1:
            raise ValueError(f"Trail length must be at least 1, got {max_length}")
        self.max_length = max_length
        self._points: deque = deque(maxlen=max_length)
        if start is not None:
            self._points.append(start)

    def push(self, point: Vec2) -> None:
        self._points.append(point)

    def clear(self) -> None:
        self._points.clear()

    def segments(self) -> Iterator[Tuple[int, float, Vec2]]:
        """
        Yield (index, fraction, point) for every point except the newest.

        ``fraction`` runs from 1/len for the oldest point up towards 1, so
        older points come out fainter and smaller. The newest point sits
        under the particle head and is not drawn as a trail segment.
        """
        count = len(self._points)
        for i in range(count - 1):
            yield i, (i + 1) / count, self._points[i]

    def to_list(self) -> List[Vec2]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Vec2:
        return self._points[index]
