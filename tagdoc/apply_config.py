"""Logic for applying configured extensions to a run context."""

import logging
from typing import Any

from tagdoc.errors import ConfigurationError
from tagdoc.run_context import RunContext

logger = logging.getLogger(__name__)


def apply_config(config: dict[str, Any], context: RunContext) -> None:
    """Register aliases, sections, new tag types and extensions.

    The configuration is plain data; each entry is routed through the
    matching hook on the context.
    """
    context.show_locals = bool(config.get("all"))
    context.strict = bool(config.get("strict"))

    for alias, tag in (config.get("aliases") or {}).items():
        context.alias(str(alias), str(tag))

    for entry in config.get("sections") or []:
        entry = _require_mapping(entry, "sections", ("name", "title"))
        context.add_section(entry["name"], entry["title"], entry.get("subtitle"))

    for entry in config.get("new_types") or []:
        entry = _require_mapping(entry, "new_types", ("tag", "header"))
        context.new_type(
            entry["tag"],
            entry["header"],
            bool(entry.get("project_level", False)),
            entry.get("subfield"),
        )

    for ext, lang in (config.get("extensions") or {}).items():
        context.add_language_extension(str(ext), str(lang))

    logger.debug("Applied config with %d aliases", len(context.tags.aliases))


def _require_mapping(entry: Any, key: str, required: tuple[str, ...]) -> dict[str, Any]:
    """Check a list entry is a mapping with the required keys."""
    if not isinstance(entry, dict):
        msg = f"{key}: expected a mapping, got {entry!r}"
        raise ConfigurationError(msg)
    missing = [k for k in required if not entry.get(k)]
    if missing:
        msg = f"{key}: entry {entry!r} is missing {', '.join(missing)}"
        raise ConfigurationError(msg)
    return entry
