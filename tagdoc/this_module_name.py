"""Logic for deducing a module name from a file path."""

from pathlib import Path

from tagdoc.errors import ConfigurationError


def this_module_name(package_base: Path | None, path: Path) -> str:
    """Return the dotted module name of a file below the package base.

    'base/pl/utils.lua' becomes 'pl.utils' and 'base/pl/init.lua' becomes
    'pl'. Without a package base the file stem is used.
    """
    if package_base is None:
        return path.stem
    try:
        rel = path.resolve().relative_to(package_base.resolve())
    except ValueError:
        msg = f"module name deduction failed: {path} is not below {package_base}"
        raise ConfigurationError(msg) from None
    parts = [*rel.parent.parts, rel.stem]
    if len(parts) > 1 and parts[-1] == "init":
        parts.pop()
    return ".".join(parts)
