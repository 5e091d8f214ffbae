# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import importlib.resources as resources
import logging
import math
import yaml

from ..api.errors import ConfigError
from ..kinematics.limits import JointLimits

logger = logging.getLogger(__name__)

_POSE_KEYS = ("x", "y", "z", "tz", "ty", "tx")


def _default_config_path() -> Path:
    pkg = "robotstate_sdk"
    res = resources.files(pkg) / "resources" / "configs" / "default.yaml"
    # as_file handles zip/installed packages
    with resources.as_file(res) as p:
        return Path(p)


def _section(parent: Dict[str, Any], key: str, name: str) -> Dict[str, Any]:
    section = parent.get(key)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping, got {type(section).__name__}")
    parent[key] = section
    return section


def _infer_dof(robot: Dict[str, Any], home: Dict[str, Any]) -> int:
    try:
        if robot.get("dof") is not None:
            dof = robot["dof"]
            if isinstance(dof, bool) or int(dof) != dof or dof < 0:
                raise ValueError(f"robot.dof must be a non-negative integer, got {dof!r}")
            return int(dof)
        if robot.get("joint_limits"):
            return len(robot["joint_limits"])
        if home.get("q") is not None:
            return len(home["q"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Cannot infer robot.dof: {e}") from e
    raise ConfigError("Cannot infer robot.dof: set robot.dof, robot.joint_limits or home.q")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else _default_config_path()
    with open(cfg_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config root must be a mapping: {cfg_path}")

    robot = _section(cfg, "robot", "robot")
    home = _section(cfg, "home", "home")

    dof = _infer_dof(robot, home)
    robot["dof"] = dof
    robot.setdefault("name", cfg_path.stem)
    robot.setdefault("joint_limits", None)

    if home.get("q") is None:
        home["q"] = [0.0] * dof
    home.setdefault("angle_unit", "rad")
    pose = _section(home, "pose", "home.pose")
    unknown = sorted(set(pose) - set(_POSE_KEYS))
    if unknown:
        raise ConfigError(f"Unknown home.pose keys: {unknown}")
    home["pose"] = {k: pose.get(k, 0.0) for k in _POSE_KEYS}

    _section(cfg, "logging", "logging").setdefault("level", "INFO")

    logger.debug("Loaded config %s (robot=%s, dof=%d)", cfg_path, robot["name"], dof)
    return cfg


def joint_limits_from_config(cfg: Dict[str, Any]) -> JointLimits:
    """Joint limits of ``cfg['robot']``; joints without limits are unbounded."""
    robot = cfg["robot"]
    dof = int(robot["dof"])
    pairs = robot.get("joint_limits")
    if not pairs:
        return JointLimits([-math.inf] * dof, [math.inf] * dof)
    if not isinstance(pairs, (list, tuple)):
        raise ConfigError(f"robot.joint_limits must be a list of [lower, upper] pairs, got {pairs!r}")
    if len(pairs) != dof:
        raise ConfigError(f"robot.joint_limits has {len(pairs)} entries, robot.dof is {dof}")
    try:
        return JointLimits.from_pairs(pairs)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid robot.joint_limits: {e}") from e
