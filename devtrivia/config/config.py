from __future__ import annotations

"""Configuration loading and validation for the trivia quiz.

Package defaults live in ``defaults.yml``. An optional user YAML file is
merged over them, then ``validate_config`` fills gaps and coerces types.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_ENV = "TRIVIA_CONFIG"
DEFAULT_DATA_PATH = "~/devmaxxing/trivia/questions.json"


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"WARNING: Ignoring config '{path}': top level must be a mapping.")
        return {}
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load package defaults, then merge the user config over them.

    Args:
        path: Optional YAML path. Falls back to $TRIVIA_CONFIG when unset.

    Returns:
        The merged (unvalidated) configuration dictionary.
    """
    cfg = _load_yaml(Path(__file__).with_name("defaults.yml"))
    user_path = path or os.environ.get(CONFIG_ENV)
    if user_path:
        cfg = _merge(cfg, _load_yaml(Path(user_path).expanduser()))
    return cfg


def _as_bool(section: Dict[str, Any], key: str, default: bool) -> None:
    value = section.get(key, default)
    if not isinstance(value, bool):
        print(f"WARNING: Expected true/false for '{key}', got {value!r}; using {default}.")
        value = default
    section[key] = value


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values."""
    for name in ("data", "ui"):
        if not isinstance(cfg.get(name), dict):
            cfg[name] = {}
    data = cfg["data"]
    ui = cfg["ui"]

    data_path = data.get("path")
    if not isinstance(data_path, str) or not data_path.strip():
        if data_path is not None:
            print(f"WARNING: Invalid data.path {data_path!r}; using '{DEFAULT_DATA_PATH}'.")
        data_path = DEFAULT_DATA_PATH
    data["path"] = data_path

    _as_bool(ui, "color", True)
    _as_bool(ui, "clear_screen", True)
    _as_bool(cfg, "explain", False)

    # https://no-color.org
    if os.environ.get("NO_COLOR"):
        ui["color"] = False

    return cfg


def resolve_data_path(cfg: Dict[str, Any], home: Optional[Path] = None) -> Path:
    """Turn ``data.path`` into an absolute path, expanding ``~`` against home."""
    raw = str(cfg.get("data", {}).get("path", DEFAULT_DATA_PATH))
    if raw == "~" or raw.startswith("~/"):
        base = Path(home) if home is not None else Path.home()
        return base.joinpath(raw[2:])
    return Path(raw).expanduser()
