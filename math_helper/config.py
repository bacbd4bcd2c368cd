"""Configuration loading.

``config.yaml`` holds a few top-level sections (``assets``, ``logging``,
``window``). Each section from the file is laid over the matching default
section key by key; a section left empty in YAML keeps its defaults.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

LOG = logging.getLogger("math_helper.config")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config.yaml"

_DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "assets": {"root": "assets"},
    "logging": {"level": "INFO"},
    "window": {"title": "Math Helper", "geometry": "1000x700"},
}


def load_config_file(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read *path* (or the project ``config.yaml``) over the defaults."""

    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        LOG.warning("config not found at %s; using defaults", cfg_path)
        return copy.deepcopy(_DEFAULT_CONFIG)
    with cfg_path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, Mapping):
        LOG.warning("config at %s is not a mapping; using defaults", cfg_path)
        loaded = {}
    return merge_sections(_DEFAULT_CONFIG, loaded)


def merge_sections(defaults: Mapping[str, Any], loaded: Mapping[str, Any]) -> Dict[str, Any]:
    cfg = copy.deepcopy(dict(defaults))
    for name, section in loaded.items():
        if section is None:
            continue
        if isinstance(section, Mapping) and isinstance(cfg.get(name), dict):
            cfg[name].update(section)
        else:
            cfg[name] = section
    return cfg


def _section(cfg: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = cfg.get(name)
    return section if isinstance(section, Mapping) else {}


def asset_root(cfg: Mapping[str, Any]) -> Path:
    """Resolve ``assets.root``; relative paths are taken from the project root."""

    root = Path(str(_section(cfg, "assets").get("root") or "assets")).expanduser()
    if not root.is_absolute():
        root = PROJECT_ROOT / root
    return root


def log_level(cfg: Mapping[str, Any]) -> int:
    name = str(_section(cfg, "logging").get("level") or "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        LOG.warning("config[logging.level]=%r invalid; using INFO", name)
        return logging.INFO
    return level
