"""A small coordinate helper for callers that sample noise along paths."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Two or three dimensional point. Addition is elementwise."""

    x: float
    y: float
    z: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __str__(self):
        return f"<{self.x:0.5f}, {self.y:0.5f}, {self.z:0.5f}>"
