import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "branchtree.yml"
CONFIG_ENV_VAR = "BRANCHTREE_CONFIG"

DEFAULTS = {
    "paths": {"logs_dir": "logs"},
    "search": {"exact_match": True},
    "logging": {
        "level": "INFO",
        "file_output": False,
        "file": "branchtree.log",
        "rotate": False,
    },
    "debug": False,
}


class BTConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.search = {**DEFAULTS["search"], **(data.get("search") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = bool(data.get("debug", DEFAULTS["debug"]))

    @property
    def exact_match(self) -> bool:
        return bool(self.search.get("exact_match", True))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'BTConfig':
    path = config_path()
    if not path.exists():
        if os.environ.get(CONFIG_ENV_VAR):
            raise FileNotFoundError(f"Config file not found: {path}")
        # Installed outside the source tree: run on defaults.
        return BTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    return BTConfig(data)

_config_cache = None

def get_config() -> 'BTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def reset_config() -> None:
    global _config_cache
    _config_cache = None
