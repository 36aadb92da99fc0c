# services/api/models/box.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple


@dataclass
class BoundingBox:
    """
    Axis-aligned box in normalized local space.

    (x, y) is the origin corner, width/height are >= 0. Every box handed out
    by the gesture/shape engine satisfies x + width <= 1 and y + height <= 1.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "BoundingBox":
        x, y, width, height = values
        return cls(float(x), float(y), float(width), float(height))

    def set(self, x: float, y: float, width: float, height: float) -> None:
        """In-place update; the owner keeps the same instance."""
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def copy(self) -> "BoundingBox":
        return BoundingBox(self.x, self.y, self.width, self.height)

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.width, self.height]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.width, self.height))

    def is_empty(self) -> bool:
        return self.width == 0 and self.height == 0

    def pixel_extent(self, parent_width: float, parent_height: float) -> Tuple[float, float]:
        return (self.width * parent_width, self.height * parent_height)
