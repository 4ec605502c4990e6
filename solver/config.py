from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

DEFAULTS: Dict[str, Any] = {
    "max_steps": None,  # bound on retained step history; None keeps every snapshot
    "show_steps": 0,
    "image_size": 450,
    "step_ms": 120,
    "end_ms": 1500,
    "max_frames": 200,
}

class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return DotDict(data)

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg

def load_config(path: str | Path | None = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None overrides."""
    cfg = DotDict(DEFAULTS)
    if path:
        data = load_yaml(path)
        unknown = set(data) - set(DEFAULTS)
        if unknown:
            raise ValueError(f"{path}: unknown config keys {sorted(unknown)}")
        cfg.update(data)
    merge_overrides(cfg, **overrides)
    if cfg.max_steps is not None and (not isinstance(cfg.max_steps, int) or cfg.max_steps < 1):
        raise ValueError(f"max_steps must be a positive integer or null, got {cfg.max_steps!r}")
    if not isinstance(cfg.show_steps, int) or cfg.show_steps < 0:
        raise ValueError(f"show_steps must be a non-negative integer, got {cfg.show_steps!r}")
    if not isinstance(cfg.image_size, int) or cfg.image_size < 9:
        raise ValueError(f"image_size must be an integer >= 9 (one pixel per cell), got {cfg.image_size!r}")
    return cfg
