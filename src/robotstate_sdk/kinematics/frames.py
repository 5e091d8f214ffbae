# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Sequence
import math
import numpy as np
from scipy.spatial.transform import Rotation

# Intrinsic Z-Y-X, upper case in scipy's notation
EULER_SEQUENCE = "ZYX"

_EX = np.array([1.0, 0.0, 0.0])
_EY = np.array([0.0, 1.0, 0.0])
_EZ = np.array([0.0, 0.0, 1.0])


def rot_x(a: float) -> np.ndarray:
    ca, sa = math.cos(a), math.sin(a)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, ca, -sa],
        [0.0, sa, ca],
    ], dtype=float)


def rot_y(a: float) -> np.ndarray:
    ca, sa = math.cos(a), math.sin(a)
    return np.array([
        [ca, 0.0, sa],
        [0.0, 1.0, 0.0],
        [-sa, 0.0, ca],
    ], dtype=float)


def rot_z(a: float) -> np.ndarray:
    ca, sa = math.cos(a), math.sin(a)
    return np.array([
        [ca, -sa, 0.0],
        [sa, ca, 0.0],
        [0.0, 0.0, 1.0],
    ], dtype=float)


def euler_zyx_to_matrix(tz: float, ty: float, tx: float) -> np.ndarray:
    return rot_z(tz) @ rot_y(ty) @ rot_x(tx)


def euler_zyx_to_quat(tz: float, ty: float, tx: float) -> np.ndarray:
    """Unit quaternion ``[w, x, y, z]`` of the intrinsic Z-Y-X rotation.

    The sequence is passed explicitly so the result does not depend on any
    library default.
    """
    xyzw = Rotation.from_euler(EULER_SEQUENCE, [tz, ty, tx]).as_quat()
    return np.array([xyzw[3], xyzw[0], xyzw[1], xyzw[2]], dtype=float)


def quat_to_matrix(quat: Sequence[float]) -> np.ndarray:
    """Rotation matrix of a ``[w, x, y, z]`` quaternion."""
    quat = np.asarray(quat, dtype=float).reshape(-1)
    if quat.shape[0] != 4:
        raise ValueError(f"Expected 4 quaternion components, got {quat.shape[0]}")
    w, x, y, z = quat
    return Rotation.from_quat([x, y, z, w]).as_matrix()


def euler_rate_matrix(tz: float, ty: float) -> np.ndarray:
    """Matrix T with omega = T @ [dtz, dty, dtx] for Z-Y-X Euler angles.

    Columns are the Z axis, then Y after the yaw rotation, then X after the
    yaw and pitch rotations. Roll does not enter T.
    """
    Rz = rot_z(tz)
    return np.column_stack([_EZ, Rz @ _EY, Rz @ rot_y(ty) @ _EX])


def transform_from_position_matrix(p: Sequence[float], R: np.ndarray) -> np.ndarray:
    T = np.eye(4, dtype=float)
    T[:3, :3] = R
    T[:3, 3] = np.asarray(p, dtype=float).reshape(-1)
    return T
