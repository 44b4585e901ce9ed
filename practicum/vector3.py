"""Three-dimensional vectors and the simple shapes built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator


class Vector:
    """A mutable vector of three floating point components."""

    __slots__ = ("_data",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._data = [float(x), float(y), float(z)]

    @classmethod
    def _from_iterable(cls, values: Iterable[float]) -> "Vector":
        x, y, z = values
        return cls(x, y, z)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __len__(self) -> int:
        return 3

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector._from_iterable(a + b for a, b in zip(self, other))

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector._from_iterable(a - b for a, b in zip(self, other))

    def __mul__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector._from_iterable(value * scalar for value in self)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector._from_iterable(value / scalar for value in self)

    def __neg__(self) -> "Vector":
        return self * -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        x, y, z = self._data
        return f"Vector({x!r}, {y!r}, {z!r})"

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(sum(value * value for value in self._data))

    def normalize(self) -> None:
        """Scale the vector in place to unit length."""
        size = self.length()
        self._data = [value / size for value in self._data]


def dot(a: Vector, b: Vector) -> float:
    """Dot product of two vectors."""
    return sum(x * y for x, y in zip(a, b))


def cross(a: Vector, b: Vector) -> Vector:
    """Cross product of two vectors."""
    return Vector(
        a[1] * b[2] - a[2] * b[1],
        -(a[0] * b[2] - a[2] * b[0]),
        a[0] * b[1] - a[1] * b[0],
    )


def length(vector: Vector) -> float:
    """Length of a vector."""
    return vector.length()


def distance(a: Vector, b: Vector) -> float:
    """Distance between two points."""
    return (a - b).length()


class Triangle:
    """A triangle given by three vertices."""

    __slots__ = ("_vertices",)

    def __init__(self, a: Vector, b: Vector, c: Vector) -> None:
        self._vertices = [a, b, c]

    def __getitem__(self, index: int) -> Vector:
        return self._vertices[index]

    def __setitem__(self, index: int, vertex: Vector) -> None:
        self._vertices[index] = vertex

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return self._vertices == other._vertices

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        a, b, c = self._vertices
        return f"Triangle({a!r}, {b!r}, {c!r})"

    def area(self) -> float:
        """Area of the triangle."""
        a, b, c = self._vertices
        return cross(a - b, a - c).length() * 0.5


@dataclass(frozen=True)
class Ray:
    """A ray starting at ``origin`` and going along ``direction``."""

    origin: Vector
    direction: Vector


@dataclass(frozen=True)
class Sphere:
    """A sphere with a centre and a radius."""

    center: Vector
    radius: float


@dataclass(frozen=True)
class Intersection:
    """Where a ray meets a surface, the surface normal there and the distance travelled."""

    position: Vector
    normal: Vector
    distance: float