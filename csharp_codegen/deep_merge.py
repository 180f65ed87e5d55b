"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = frozenset({"usings", "extra_keywords"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge update over base, recursing into nested sections.

    Lists under ADDITIVE_KEYS are unioned and sorted so a project config can
    add usings or keywords without repeating the defaults. Any other value in
    update replaces the one in base.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            merged_set = set(result[key])
            merged_set.update(value)
            result[key] = sorted(merged_set)
        else:
            result[key] = value
    return result
