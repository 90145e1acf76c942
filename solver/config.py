from __future__ import annotations
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

DEFAULTS: Dict[str, Any] = {
    "difficulty": "medium",
    "count": 1,
    "seed": None,
    "log_level": "INFO",
    "solver": {"deadline_secs": None},
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def _wrap(data: Any) -> Any:
    if isinstance(data, dict):
        return DotDict({k: _wrap(v) for k, v in data.items()})
    return data


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return _wrap(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def _deep_update(base: Dict[str, Any], other: Dict[str, Any]) -> Dict[str, Any]:
    for k, v in other.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            _deep_update(base[k], v)
        else:
            base[k] = _wrap(v)
    return base


def load_config(path: Optional[str | Path] = None) -> DotDict:
    """Built-in defaults with the YAML file at `path` layered on top."""
    cfg = _wrap(deepcopy(DEFAULTS))
    if path is not None:
        _deep_update(cfg, load_yaml(path))
    return cfg
