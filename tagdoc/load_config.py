"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from tagdoc.deep_merge import deep_merge
from tagdoc.errors import ConfigurationError

CONFIG_NAME = "tagdoc.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "project": None,
    "title": "Reference",
    "file": None,
    "package": ".",
    "all": False,
    "strict": False,
    "aliases": {},
    "sections": [],
    "new_types": [],
    "extensions": {},
}


def load_config(path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"cannot read config {p}: {e}"
                raise ConfigurationError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"config {p} must be a mapping"
                raise ConfigurationError(msg)
            config = deep_merge(config, user_config)
    return config
