"""Logic for splitting qualified Lua/C names."""

import re

DOTTED_RE = re.compile(r"^(.+)[.:]([^.:]+)$")


def split_dotted_name(name: str) -> tuple[str | None, str]:
    """Split 'pkg.mod.fun' into ('pkg.mod', 'fun'); methods split at ':'."""
    m = DOTTED_RE.match(name)
    if not m:
        return None, name
    return m.group(1), m.group(2)
