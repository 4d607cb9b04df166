"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from renderkit.matrix import Matrix4x4
from renderkit.vector import Vector3

SLERP_LINEAR_THRESHOLD = 0.9995


@dataclass(frozen=True)
class Quaternion:
    """Quaternion ``x i + y j + z k + w``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quaternion:
        """The identity rotation."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis``."""
        n = axis.normalized()
        s = math.sin(angle / 2.0)
        return cls(n.x * s, n.y * s, n.z * s, math.cos(angle / 2.0))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        lhs, rhs = self, other
        return Quaternion(
            lhs.w * rhs.x + lhs.x * rhs.w + lhs.y * rhs.z - lhs.z * rhs.y,
            lhs.w * rhs.y - lhs.x * rhs.z + lhs.y * rhs.w + lhs.z * rhs.x,
            lhs.w * rhs.z + lhs.x * rhs.y - lhs.y * rhs.x + lhs.z * rhs.w,
            lhs.w * rhs.w - lhs.x * rhs.x - lhs.y * rhs.y - lhs.z * rhs.z,
        )

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def conjugate(self) -> Quaternion:
        """Quaternion with the vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Quaternion:
        """Unit quaternion; a zero quaternion becomes the identity."""
        norm = self.norm()
        if norm == 0.0:
            return Quaternion.identity()
        return Quaternion(self.x / norm, self.y / norm, self.z / norm, self.w / norm)

    def inverse(self) -> Quaternion:
        """Multiplicative inverse; a zero quaternion becomes the identity."""
        norm_sq = self.norm() ** 2
        if norm_sq == 0.0:
            return Quaternion.identity()
        c = self.conjugate()
        return Quaternion(c.x / norm_sq, c.y / norm_sq, c.z / norm_sq, c.w / norm_sq)

    def dot(self, other: Quaternion) -> float:
        """Four-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def rotate_vector(self, vector: Vector3) -> Vector3:
        """Rotate ``vector`` by this quaternion."""
        result = self * Quaternion(vector.x, vector.y, vector.z, 0.0) * self.conjugate()
        return Vector3(result.x, result.y, result.z)

    def to_matrix(self) -> Matrix4x4:
        """Rotation matrix for row vectors (``v' = v * M``)."""
        x, y, z, w = self
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return Matrix4x4(
            [
                [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy), 0.0],
                [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx), 0.0],
                [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        ).transpose()

    def slerp(self, other: Quaternion, t: float) -> Quaternion:
        """Spherical linear interpolation along the shorter arc."""
        dot = self.dot(other)
        if dot < 0.0:
            return self.slerp(-other, t)
        if dot > SLERP_LINEAR_THRESHOLD:
            blended = Quaternion(
                self.x + t * (other.x - self.x),
                self.y + t * (other.y - self.y),
                self.z + t * (other.z - self.z),
                self.w + t * (other.w - self.w),
            )
            norm = blended.norm()
            return Quaternion(
                blended.x / norm, blended.y / norm, blended.z / norm, blended.w / norm
            )
        theta_0 = math.acos(dot)
        theta = theta_0 * t
        sin_theta = math.sin(theta)
        sin_theta_0 = math.sin(theta_0)
        s0 = math.cos(theta) - dot * sin_theta / sin_theta_0
        s1 = sin_theta / sin_theta_0
        return Quaternion(
            s0 * self.x + s1 * other.x,
            s0 * self.y + s1 * other.y,
            s0 * self.z + s1 * other.z,
            s0 * self.w + s1 * other.w,
        )