# -*- coding: utf-8 -*-

class RobotStateError(Exception):
    """Base SDK error."""


class ValidationError(RobotStateError, ValueError):
    """Pose field out of its declared range or not numeric."""


class FieldError(RobotStateError, KeyError):
    """Invalid extension field operation on a RobotConfiguration."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""


class ConfigError(RobotStateError):
    pass
