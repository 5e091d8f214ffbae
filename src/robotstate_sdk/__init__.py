from .api import (
    Pose,
    RobotConfiguration,
    RobotStateError,
    ValidationError,
    FieldError,
    ConfigError,
)
from .config import load_config, joint_limits_from_config, setup_logging
from .kinematics import JointLimits, ConfigurationChecker, JointLimitChecker

__version__ = "0.1.0"

__all__ = [
    "Pose",
    "RobotConfiguration",
    "RobotStateError",
    "ValidationError",
    "FieldError",
    "ConfigError",
    "load_config",
    "joint_limits_from_config",
    "setup_logging",
    "JointLimits",
    "ConfigurationChecker",
    "JointLimitChecker",
]
