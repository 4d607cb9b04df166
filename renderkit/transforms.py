"""Builders for transformation matrices and point transforms.

Matrices follow the row-vector convention: a point is transformed as
``v * M`` and the translation lives in the last row.
"""

from __future__ import annotations

import math

from renderkit.matrix import Matrix4x4
from renderkit.quaternion import Quaternion
from renderkit.vector import Vector3


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """Translation by ``translate``."""
    return Matrix4x4(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [translate.x, translate.y, translate.z, 1.0],
        ]
    )


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Scaling along the axes by ``scale``."""
    return Matrix4x4(
        [
            [scale.x, 0.0, 0.0, 0.0],
            [0.0, scale.y, 0.0, 0.0],
            [0.0, 0.0, scale.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point, dividing by the homogeneous w.

    Raises ValueError if w comes out as zero.
    """
    m = matrix.m
    x, y, z = vector
    rx = x * m[0][0] + y * m[1][0] + z * m[2][0] + m[3][0]
    ry = x * m[0][1] + y * m[1][1] + z * m[2][1] + m[3][1]
    rz = x * m[0][2] + y * m[1][2] + z * m[2][2] + m[3][2]
    w = x * m[0][3] + y * m[1][3] + z * m[2][3] + m[3][3]
    if w == 0.0:
        raise ValueError("transformed point has w == 0")
    return Vector3(rx / w, ry / w, rz / w)


def transform_normal(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a direction, ignoring translation."""
    m = matrix.m
    x, y, z = vector
    return Vector3(
        x * m[0][0] + y * m[1][0] + z * m[2][0],
        x * m[0][1] + y * m[1][1] + z * m[2][1],
        x * m[0][2] + y * m[1][2] + z * m[2][2],
    )


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    """Rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        [
            [c, 0.0, -s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4(
        [
            [c, s, 0.0, 0.0],
            [-s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def make_rotate_xyz_matrix(rotate: Vector3) -> Matrix4x4:
    """Combined rotation ``X * (Y * Z)`` from Euler angles."""
    return make_rotate_x_matrix(rotate.x) * (
        make_rotate_y_matrix(rotate.y) * make_rotate_z_matrix(rotate.z)
    )


def make_affine_matrix(
    scale: Vector3, rotate: Vector3 | Quaternion, translate: Vector3
) -> Matrix4x4:
    """Scale, then rotate (Euler angles or quaternion), then translate."""
    if isinstance(rotate, Quaternion):
        rotation = rotate.to_matrix()
    else:
        rotation = make_rotate_xyz_matrix(rotate)
    return make_scale_matrix(scale) * (rotation * make_translate_matrix(translate))


def make_perspective_fov_matrix(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Perspective projection from a vertical field of view."""
    cot = 1.0 / math.tan(fov_y / 2.0)
    return Matrix4x4(
        [
            [cot / aspect_ratio, 0.0, 0.0, 0.0],
            [0.0, cot, 0.0, 0.0],
            [0.0, 0.0, far_clip / far_clip - near_clip, 1.0],
            [0.0, 0.0, (-far_clip * near_clip) / (far_clip - near_clip), 0.0],
        ]
    )


def make_orthographic_matrix(
    left: float,
    top: float,
    right: float,
    bottom: float,
    near_clip: float,
    far_clip: float,
) -> Matrix4x4:
    """Orthographic projection of the given box onto clip space."""
    return Matrix4x4(
        [
            [2.0 / (right - left), 0.0, 0.0, 0.0],
            [0.0, 2.0 / (top - bottom), 0.0, 0.0],
            [0.0, 0.0, 1.0 / (far_clip - near_clip), 0.0],
            [
                (left + right) / (left - right),
                (top + bottom) / (bottom - top),
                near_clip / (near_clip - far_clip),
                1.0,
            ],
        ]
    )


def make_viewport_matrix(
    left: float,
    top: float,
    width: float,
    height: float,
    min_depth: float,
    max_depth: float,
) -> Matrix4x4:
    """Map normalised device coordinates to a screen viewport."""
    return Matrix4x4(
        [
            [width / 2.0, 0.0, 0.0, 0.0],
            [0.0, -(height / 2.0), 0.0, 0.0],
            [0.0, 0.0, max_depth - min_depth, 0.0],
            [left + width / 2.0, top + height / 2.0, min_depth, 1.0],
        ]
    )


def make_rotate_axis_angle(axis: Vector3, angle: float) -> Matrix4x4:
    """Rotation of ``angle`` radians about ``axis``."""
    length = axis.length()
    n = axis / length if length != 0.0 else axis
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    return Matrix4x4(
        [
            [c + n.x * n.x * t, n.x * n.y * t - n.z * s, n.x * n.z * t + n.y * s, 0.0],
            [n.y * n.x * t + n.z * s, c + n.y * n.y * t, n.y * n.z * t - n.x * s, 0.0],
            [n.z * n.x * t - n.y * s, n.z * n.y * t + n.x * s, c + n.z * n.z * t, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    ).transpose()


def direction_to_direction(source: Vector3, target: Vector3) -> Matrix4x4:
    """Rotation taking unit direction ``source`` onto unit direction ``target``."""
    n = source.cross(target).normalized()
    if source == -target:
        if source.x != 0.0 or source.y != 0.0:
            n = Vector3(source.y, -source.x, 0.0)
        elif source.x != 0.0 or source.z != 0.0:
            n = Vector3(source.z, 0.0, -source.x)
    c = source.dot(target)
    s = source.cross(target).length()
    t = 1.0 - c
    return Matrix4x4(
        [
            [n.x * n.x * t + c, n.x * n.y * t + n.z * s, n.x * n.z * t - n.y * s, 0.0],
            [n.x * n.y * t - n.z * s, n.y * n.y * t + c, n.y * n.z * t + n.x * s, 0.0],
            [n.x * n.z * t + n.y * s, n.y * n.z * t - n.x * s, n.z * n.z * t + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )