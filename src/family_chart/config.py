import os
from pathlib import Path
from typing import Optional

import yaml

from family_chart.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "family_chart.yml"
CONFIG_ENV_VAR = "FAMILY_CHART_CONFIG"


class FCConfig:
    def __init__(self, data, source: Optional[Path] = None):
        self.paths = data.get("paths", {}) or {}
        self.parser = data.get("parser", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = bool(data.get("debug", False))
        # File the values came from; None when running on defaults.
        self.source = source


def _config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        return path
    return CONFIG_PATH


def load_config() -> 'FCConfig':
    path = _config_path()
    if not path.exists():
        # Installed without the project tree; run on defaults.
        return FCConfig({})

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")

    return FCConfig(data, source=path)

_config_cache = None

def get_config() -> 'FCConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
