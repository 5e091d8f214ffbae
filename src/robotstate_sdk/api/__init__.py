from .pose import Pose
from .configuration import RobotConfiguration
from .errors import RobotStateError, ValidationError, FieldError, ConfigError

__all__ = [
    "Pose",
    "RobotConfiguration",
    "RobotStateError",
    "ValidationError",
    "FieldError",
    "ConfigError",
]
