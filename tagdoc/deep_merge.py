"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_LIST_KEYS = {"sections", "new_types"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively ('aliases', 'extensions' included).
    - Lists in 'update' replace 'base' lists, EXCEPT for specific keys.
    - 'sections' and 'new_types' are additive, keeping order.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_LIST_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = [*result[key], *(v for v in value if v not in result[key])]
        else:
            # Default: Replacement (scalars and other lists)
            result[key] = value
    return result
