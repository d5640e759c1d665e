"""Logic for locating the configuration file for a source argument."""

import logging
from pathlib import Path

from tagdoc.errors import ConfigurationError
from tagdoc.load_config import CONFIG_NAME

logger = logging.getLogger(__name__)


def find_config(source: Path) -> Path | None:
    """Return the config file that applies to a source file or directory.

    '.' requires a config file in the current directory. A directory uses
    the first config file found in its tree, and a single file uses one
    beside it if present.
    """
    if str(source) == ".":
        config = Path(CONFIG_NAME)
        if not config.is_file():
            msg = f"no {CONFIG_NAME!r} found here"
            raise ConfigurationError(msg)
        return config
    if source.is_dir():
        found = sorted(source.rglob(CONFIG_NAME))
        if len(found) > 1:
            others = ", ".join(str(p) for p in found[1:])
            logger.warning("Other config files found: %s", others)
        return found[0] if found else None
    config = source.parent / CONFIG_NAME
    return config if config.is_file() else None
