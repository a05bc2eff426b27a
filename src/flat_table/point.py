"""
Point: a plain 3D vector, usable as a table element type.

``Point()`` is the origin, so ``Table.new_sized(..., dtype=Point)`` fills a
table with zero points.
"""

from __future__ import annotations
from dataclasses import dataclass
import math


def _ieee_div(a: float, b: float) -> float:
    """Float division that yields nan/inf for a zero divisor instead of raising."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass
class Point:
    """
    3D point / vector with float components.

    Examples
    --------
    >>> Point(1, 0, 0).cross(Point(0, 1, 0))
    Point(x=0.0, y=0.0, z=1.0)
    >>> Point(3, 4, 0).length()
    5.0
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def to_vec(self) -> list[float]:
        return [self.x, self.y, self.z]

    def distance(self, other: Point) -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Point) -> Point:
        return Point(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return self.distance(Point())

    def length_squared(self) -> float:
        return self.distance_squared(Point())

    def normalize(self) -> Point:
        """Unit vector in the same direction. A zero point gives nan components."""
        length = self.length()
        return Point(
            _ieee_div(self.x, length),
            _ieee_div(self.y, length),
            _ieee_div(self.z, length),
        )

    def scale(self, scalar: float) -> Point:
        """Scale in place and return a copy of the result."""
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return Point(self.x, self.y, self.z)

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self):
        return Point(-self.x, -self.y, -self.z)

    def __matmul__(self, other):
        """``a @ b`` is the dot product."""
        if not isinstance(other, Point):
            return NotImplemented
        return self.dot(other)
