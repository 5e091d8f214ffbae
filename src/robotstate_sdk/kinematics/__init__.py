from .frames import (
    rot_x,
    rot_y,
    rot_z,
    euler_zyx_to_matrix,
    euler_zyx_to_quat,
    quat_to_matrix,
    euler_rate_matrix,
    transform_from_position_matrix,
)
from .limits import JointLimits, ConfigurationChecker, JointLimitChecker

__all__ = [
    "rot_x",
    "rot_y",
    "rot_z",
    "euler_zyx_to_matrix",
    "euler_zyx_to_quat",
    "quat_to_matrix",
    "euler_rate_matrix",
    "transform_from_position_matrix",
    "JointLimits",
    "ConfigurationChecker",
    "JointLimitChecker",
]
