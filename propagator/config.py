# config.py
# Solver settings: built-in defaults, then an optional YAML file, then CLI overrides (None = keep).

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

DEFAULTS: dict[str, Any] = {
    "max_steps": 20,
    "details": False,
    "color": True,
    "image_size": 900,
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: dict[str, Any], **overrides) -> dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_config(path: str | Path | None = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None keyword overrides."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        cfg.update(load_yaml(path))
    merge_overrides(cfg, **overrides)
    if int(cfg.max_steps) < 1:
        raise ValueError(f"max_steps must be >= 1, got {cfg.max_steps}")
    return cfg
