# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Union
import logging


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the *root* logger once (only lowers the level if already configured)."""
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")

    root = logging.getLogger()
    if root.handlers:
        if root.level > level:
            root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(asctime)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
