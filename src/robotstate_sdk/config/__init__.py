from .loader import load_config, joint_limits_from_config
from .log import setup_logging

__all__ = ["load_config", "joint_limits_from_config", "setup_logging"]
