# -*- coding: utf-8 -*-
"""TCP pose: Cartesian position plus Z-Y-X Euler orientation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple
import math
import numbers
import numpy as np

from .errors import ValidationError
from ..kinematics.frames import (
    euler_rate_matrix,
    euler_zyx_to_matrix,
    euler_zyx_to_quat,
    rot_x,
    rot_y,
    rot_z,
    transform_from_position_matrix,
)

ANGLE_LIMITS_RAD: Dict[str, Tuple[float, float]] = {
    "tz": (-math.pi, math.pi),
    "ty": (-math.pi / 2.0, math.pi / 2.0),
    "tx": (-math.pi, math.pi),
}
ANGLE_LIMITS_DEG: Dict[str, Tuple[float, float]] = {
    "tz": (-180.0, 180.0),
    "ty": (-90.0, 90.0),
    "tx": (-180.0, 180.0),
}
_POSITION_FIELDS = ("x", "y", "z")


def _as_real(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"Pose.{name} must be a real number, got {type(value).__name__}")
    return float(value)


def _check_range(name: str, value: float, limits: Dict[str, Tuple[float, float]], unit: str) -> float:
    lo, hi = limits[name]
    if not (lo <= value <= hi):
        raise ValidationError(f"Pose.{name}={value} {unit} outside [{lo}, {hi}]")
    return value


@dataclass
class Pose:
    """TCP position and orientation.

    Angles are intrinsic Z-Y-X Euler angles in radians, so R = Rz @ Ry @ Rx.
    The ranges of ``tz``, ``ty`` and ``tx`` are checked on every assignment,
    including the ones done by ``__init__``.

    Example:
        - p = Pose(x, y, z, tz, ty, tx)
        - p = Pose(y=1.0, tz=math.pi / 4)
        - p = Pose.from_degrees(y=1.0, tz=45.0)
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    tz: float = 0.0
    ty: float = 0.0
    tx: float = 0.0

    def __setattr__(self, name, value):
        if name in ANGLE_LIMITS_RAD:
            value = _check_range(name, _as_real(name, value), ANGLE_LIMITS_RAD, "rad")
        elif name in _POSITION_FIELDS:
            value = _as_real(name, value)
        object.__setattr__(self, name, value)

    @classmethod
    def from_radians(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                     tz: float = 0.0, ty: float = 0.0, tx: float = 0.0) -> "Pose":
        return cls(x, y, z, tz, ty, tx)

    @classmethod
    def from_degrees(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                     tz: float = 0.0, ty: float = 0.0, tx: float = 0.0) -> "Pose":
        """Build a pose whose angles are given in degrees.

        Angles are range-checked in degrees, then converted once to radians.
        """
        rad = {}
        for name, value in (("tz", tz), ("ty", ty), ("tx", tx)):
            deg = _check_range(name, _as_real(name, value), ANGLE_LIMITS_DEG, "deg")
            lo, hi = ANGLE_LIMITS_RAD[name]
            # conversion rounding must not push +-180 / +-90 past the radian bound
            rad[name] = min(max(math.radians(deg), lo), hi)
        return cls(x, y, z, rad["tz"], rad["ty"], rad["tx"])

    # ----- vectors -----

    def position(self) -> np.ndarray:
        """TCP Cartesian position [x, y, z]."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def euler_angles(self) -> np.ndarray:
        """Z-Y-X Euler angles [tz, ty, tx]."""
        return np.array([self.tz, self.ty, self.tx], dtype=float)

    # ----- rotations -----

    def rotation_z(self) -> np.ndarray:
        return rot_z(self.tz)

    def rotation_y(self) -> np.ndarray:
        return rot_y(self.ty)

    def rotation_x(self) -> np.ndarray:
        return rot_x(self.tx)

    def rotation(self) -> np.ndarray:
        return euler_zyx_to_matrix(self.tz, self.ty, self.tx)

    def quaternion(self) -> np.ndarray:
        """Unit quaternion [w, x, y, z] of ``rotation()``."""
        return euler_zyx_to_quat(self.tz, self.ty, self.tx)

    def transform(self) -> np.ndarray:
        return transform_from_position_matrix(self.position(), self.rotation())

    # ----- rates -----

    def euler_rate_to_angular_velocity_matrix(self) -> np.ndarray:
        return euler_rate_matrix(self.tz, self.ty)

    def angular_velocity(self, euler_rates: Sequence[float]) -> np.ndarray:
        rates = np.asarray(euler_rates, dtype=float).reshape(-1)
        if rates.shape[0] != 3:
            raise ValueError(f"Expected 3 Euler rates, got {rates.shape[0]}")
        return self.euler_rate_to_angular_velocity_matrix() @ rates
