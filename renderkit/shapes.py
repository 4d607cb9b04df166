"""Geometric primitives used for collision and picking."""

from __future__ import annotations

from dataclasses import dataclass, field

from renderkit.vector import Vector3


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass(frozen=True)
class Sphere:
    """Sphere given by its centre and radius."""

    center: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0


@dataclass(frozen=True)
class Line:
    """Infinite line through ``origin`` along ``diff``."""

    origin: Vector3 = field(default_factory=Vector3)
    diff: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class Ray:
    """Half-line starting at ``origin`` along ``diff``."""

    origin: Vector3 = field(default_factory=Vector3)
    diff: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class Segment:
    """Segment from ``origin`` to ``origin + diff``."""

    origin: Vector3 = field(default_factory=Vector3)
    diff: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class Plane:
    """Plane with unit ``normal`` at ``distance`` from the origin."""

    normal: Vector3 = field(default_factory=Vector3)
    distance: float = 0.0


@dataclass(frozen=True)
class Triangle:
    """Triangle given by three vertices."""

    vertices: tuple[Vector3, Vector3, Vector3]

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        if len(vertices) != 3:
            raise ValueError("a triangle needs exactly three vertices")
        object.__setattr__(self, "vertices", vertices)


@dataclass(frozen=True)
class AABB:
    """Axis-aligned box between ``min`` and ``max`` corners."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)

    def contains_point(self, point: Vector3) -> bool:
        """True when ``point`` lies inside the box or on its surface."""
        closest = Vector3(
            _clamp(point.x, self.min.x, self.max.x),
            _clamp(point.y, self.min.y, self.max.y),
            _clamp(point.z, self.min.z, self.max.z),
        )
        return (closest - point).length() <= 0


@dataclass(frozen=True)
class OBB:
    """Oriented box: centre, three orthonormal axes and half extents."""

    center: Vector3 = field(default_factory=Vector3)
    orientations: tuple[Vector3, Vector3, Vector3] = (
        Vector3(1.0, 0.0, 0.0),
        Vector3(0.0, 1.0, 0.0),
        Vector3(0.0, 0.0, 1.0),
    )
    size: Vector3 = field(default_factory=Vector3)

    def __post_init__(self) -> None:
        orientations = tuple(self.orientations)
        if len(orientations) != 3:
            raise ValueError("an OBB needs exactly three orientation axes")
        object.__setattr__(self, "orientations", orientations)


@dataclass(frozen=True)
class Vector2Int:
    """Two-component integer vector."""

    x: int = 0
    y: int = 0