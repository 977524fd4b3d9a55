from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """Bounding box of a room.

    ``x2``/``y2`` are ``x1 + width``/``y1 + height``. Rooms are carved over
    the half-open ranges ``(x1, x2]`` and ``(y1, y2]``, so the row ``y1`` and
    the column ``x1`` always stay wall.
    """

    x1: int
    y1: int
    x2: int
    y2: int

    def __post_init__(self) -> None:
        if self.x1 >= self.x2 or self.y1 >= self.y2:
            raise ValueError(f"Degenerate rectangle: ({self.x1},{self.y1})-({self.x2},{self.y2})")

    @classmethod
    def new(cls, x: int, y: int, width: int, height: int) -> "Rect":
        if width <= 0 or height <= 0:
            raise ValueError(f"Rect size must be positive, got {width}x{height}")
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def does_intersect(self, other: "Rect") -> bool:
        """Closed-interval overlap test; rectangles touching along an edge intersect."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def center(self) -> Point:
        return Point((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def interior(self) -> Iterator[Point]:
        """Cells carved to floor for this room, row by row."""
        for y in range(self.y1 + 1, self.y2 + 1):
            for x in range(self.x1 + 1, self.x2 + 1):
                yield Point(x, y)
