"""Logic for expanding file and directory arguments into source files."""

from pathlib import Path

from tagdoc.errors import ConfigurationError
from tagdoc.language_registry import LanguageRegistry


def collect_source_files(
    targets: list[Path], languages: LanguageRegistry
) -> list[Path]:
    """Return the files under the targets that have a known language.

    Directories are walked recursively in sorted order so that module
    merging is deterministic.
    """
    found: list[Path] = []
    for target in targets:
        if target.is_dir():
            candidates = sorted(p for p in target.rglob("*") if p.is_file())
        elif target.is_file():
            candidates = [target]
        else:
            msg = f"file or directory does not exist: {target}"
            raise ConfigurationError(msg)
        found.extend(p for p in candidates if languages.for_path(p) is not None)
    if not found:
        msg = "no source files found in " + ", ".join(str(t) for t in targets)
        raise ConfigurationError(msg)
    return found
