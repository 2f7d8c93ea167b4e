from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

# Built-in defaults; a --config YAML file overrides these, explicit CLI flags override both.
DEFAULTS: Dict[str, Any] = {
    "puzzles_file": None,
    "verbose": False,
    "render_empty": ".",
    "image_out": None,
    "json": False,
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: config must be a mapping, got {type(data).__name__}")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def build_config(config_path: str | Path | None = None, **overrides) -> DotDict:
    cfg = DotDict(DEFAULTS)
    if config_path:
        file_cfg = load_yaml(config_path)
        unknown = set(file_cfg) - set(DEFAULTS)
        if unknown:
            raise ValueError(f"{config_path}: unknown config key(s): {', '.join(sorted(unknown))}")
        cfg.update(file_cfg)
    return merge_overrides(cfg, **overrides)
