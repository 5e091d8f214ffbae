# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence
import copy
import logging
import numpy as np

from .errors import ConfigError, FieldError
from .pose import Pose
from ..config import load_config

logger = logging.getLogger(__name__)

_FIXED_FIELDS = frozenset({"q", "pose", "is_reachable", "is_collision_free", "is_valid"})


class RobotConfiguration:
    """All data describing a robot configuration: actuated joint positions and pose.

    Works for serial and parallel robots. Robot-type-specific data is carried
    by named extension fields (see ``add_field``). Instances are mutable and
    shared by reference, so use ``clone()`` to get an independent snapshot.
    There is no internal locking.

    The reachability and collision flags are written by external checkers
    (e.g. ``kinematics.JointLimitChecker``); this class never computes them.

    Example:
        rc = RobotConfiguration([], Pose())
        rc.add_field("some_additional_prop")
        rc.set_field("some_additional_prop", 58)
    """

    def __init__(self, q: Sequence[float], pose: Pose):
        self.q = q
        self.pose = pose
        self.is_reachable = False
        self.is_collision_free = False
        self._extensions: Dict[str, Any] = {}

    @classmethod
    def from_config(cls, path: Optional[str] = None) -> "RobotConfiguration":
        """Home configuration declared in a YAML config (packaged default if None)."""
        cfg = load_config(path)
        home = cfg["home"]
        dof = int(cfg["robot"]["dof"])

        q = np.asarray(home["q"], dtype=float).reshape(-1)
        if q.shape[0] != dof:
            raise ConfigError(f"home.q has {q.shape[0]} values, robot.dof is {dof}")

        unit = home["angle_unit"]
        pose_kwargs = home["pose"]
        if unit == "rad":
            pose = Pose.from_radians(**pose_kwargs)
        elif unit == "deg":
            pose = Pose.from_degrees(**pose_kwargs)
        else:
            raise ConfigError(f"Unknown angle unit: {unit}")
        return cls(q, pose)

    # ----- fixed fields -----

    @property
    def q(self) -> np.ndarray:
        return self._q

    @q.setter
    def q(self, value: Sequence[float]) -> None:
        if value is None or isinstance(value, (str, bytes)) or np.ndim(value) == 0:
            raise TypeError(f"q must be a sequence of joint positions, got {type(value).__name__}")
        q = np.array(value, dtype=float)
        if q.ndim != 1:
            raise ValueError(f"q must be one-dimensional, got shape {q.shape}")
        self._q = q

    @property
    def pose(self) -> Pose:
        return self._pose

    @pose.setter
    def pose(self, value: Pose) -> None:
        if not isinstance(value, Pose):
            raise TypeError(f"pose must be a Pose, got {type(value).__name__}")
        self._pose = copy.copy(value)

    @property
    def is_reachable(self) -> bool:
        return self._is_reachable

    @is_reachable.setter
    def is_reachable(self, value: bool) -> None:
        self._is_reachable = bool(value)

    @property
    def is_collision_free(self) -> bool:
        return self._is_collision_free

    @is_collision_free.setter
    def is_collision_free(self, value: bool) -> None:
        self._is_collision_free = bool(value)

    @property
    def is_valid(self) -> bool:
        """Reachable and collision-free."""
        return self._is_reachable and self._is_collision_free

    # ----- extension fields -----

    def add_field(self, name: str, value: Any = None) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            raise FieldError(f"Invalid field name: {name!r}")
        if name in _FIXED_FIELDS:
            raise FieldError(f"Field name clashes with a fixed attribute: {name}")
        if name in self._extensions:
            raise FieldError(f"Field already exists: {name}")
        self._extensions[name] = value

    def has_field(self, name: str) -> bool:
        return name in self._extensions

    def get_field(self, name: str) -> Any:
        try:
            return self._extensions[name]
        except KeyError:
            raise FieldError(f"Unknown field: {name}") from None

    def set_field(self, name: str, value: Any) -> None:
        if name not in self._extensions:
            raise FieldError(f"Unknown field: {name}")
        self._extensions[name] = value

    def remove_field(self, name: str) -> None:
        if name not in self._extensions:
            raise FieldError(f"Unknown field: {name}")
        del self._extensions[name]

    def field_names(self) -> List[str]:
        return list(self._extensions)

    # ----- copy -----

    def clone(self) -> "RobotConfiguration":
        """Independent copy; the object is shared by reference otherwise."""
        cloned = type(self)(self._q, self._pose)
        cloned.is_reachable = self._is_reachable
        cloned.is_collision_free = self._is_collision_free
        for name, value in self._extensions.items():
            cloned.add_field(name, copy.deepcopy(value))
        logger.debug("Cloned configuration with %d extension fields", len(self._extensions))
        return cloned

    def __repr__(self) -> str:
        return (
            f"RobotConfiguration(q={self._q.tolist()}, pose={self._pose!r}, "
            f"is_reachable={self._is_reachable}, is_collision_free={self._is_collision_free}, "
            f"fields={self.field_names()})"
        )
