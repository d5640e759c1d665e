"""Logic for resolving the package root used for module names."""

from pathlib import Path

from tagdoc.errors import ConfigurationError


def resolve_package_base(package: str | None, source_dir: Path) -> Path | None:
    """Resolve the configured package setting against the source directory.

    '.' is the source directory itself and '..' its parent. A bare name must
    be either the source directory's own name (its parent is the base) or a
    subdirectory of it (the source directory is the base). Anything with a
    path separator is taken as a path.
    """
    if not package:
        return None
    source_dir = source_dir.resolve()
    if package == ".":
        return source_dir
    if package == "..":
        return source_dir.parent
    if "/" in package or "\\" in package:
        return Path(package).resolve()
    if source_dir.name == package:
        return source_dir.parent
    if (source_dir / package).is_dir():
        return source_dir
    msg = f"package {package!r} is not the name of the source directory"
    raise ConfigurationError(msg)
