"""Three-component vectors and axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from pgekit.mathlib import acos, cos, fabs, sin, sqrt

__all__ = ["Vec3", "Rect2"]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vec3:
        """Multiply every component by a scalar."""
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vec3) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean length."""
        return sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        squared = self.dot(self)
        if squared == 0.0:
            return Vec3(0.0, 0.0, 0.0)
        inv = 1.0 / sqrt(squared)
        return Vec3(
            _clamp_unit(self.x * inv),
            _clamp_unit(self.y * inv),
            _clamp_unit(self.z * inv),
        )

    def angle(self, other: Vec3) -> float:
        """Angle in radians between this vector and another."""
        d = self.normalized().dot(other.normalized())
        return acos(_clamp_unit(d))

    def rotate_z(self, angle: float) -> Vec3:
        """Rotate about the Z axis by an angle in radians."""
        c = cos(angle)
        s = sin(angle)
        return Vec3(self.x * c - self.y * s, self.x * s + self.y * c, self.z)


def _clamp_unit(v: float) -> float:
    return -1.0 if v < -1.0 else 1.0 if v > 1.0 else v


@dataclass
class Rect2:
    """A rectangle spanned by (x1, y1)-(x2, y2).

    A clean rectangle holds no points yet; the first point encapsulated
    sets all its edges.
    """

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    clean: bool = True

    def clear(self) -> None:
        """Mark the rectangle as holding no points."""
        self.clean = True

    def set_radius(self, x: float, y: float, r: float) -> None:
        """Set the rectangle to the square of half-side r centred on (x, y)."""
        self.x1 = x - r
        self.x2 = x + r
        self.y1 = y - r
        self.y2 = y + r
        self.clean = False

    def encapsulate(self, x: float, y: float) -> None:
        """Grow the rectangle so that it includes the point (x, y)."""
        if self.clean:
            self.x1 = self.x2 = x
            self.y1 = self.y2 = y
            self.clean = False
            return
        if x < self.x1:
            self.x1 = x
        if x > self.x2:
            self.x2 = x
        if y < self.y1:
            self.y1 = y
        if y > self.y2:
            self.y2 = y

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; the far edges are excluded."""
        return self.x1 <= x < self.x2 and self.y1 <= y < self.y2

    def intersects(self, other: Rect2) -> bool:
        """True if the two rectangles overlap with non-zero area."""
        if fabs(self.x1 + self.x2 - other.x1 - other.x2) < (
            self.x2 - self.x1 + other.x2 - other.x1
        ):
            if fabs(self.y1 + self.y2 - other.y1 - other.y2) < (
                self.y2 - self.y1 + other.y2 - other.y1
            ):
                return True
        return False