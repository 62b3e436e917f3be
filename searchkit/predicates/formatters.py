"""Named value formatters and validators for predicate files.

Predicate YAML files refer to these by name, since callables can't be
expressed in YAML.
"""

from __future__ import annotations

from typing import Any, Callable

_TRUE_VALUES = {"1", "t", "true", "y", "yes", "on"}
_FALSE_VALUES = {"0", "f", "false", "n", "no", "off"}


def escape_wildcards(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def is_present(value: Any) -> bool:
    """Default validator: not None and not an empty string/collection."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) > 0
    return True


def _cast_boolean(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def _negate_boolean(value: Any) -> bool | None:
    cast = _cast_boolean(value)
    return None if cast is None else not cast


def is_boolean(value: Any) -> bool:
    return _cast_boolean(value) is not None


def is_true(value: Any) -> bool:
    return _cast_boolean(value) is True


FORMATTERS: dict[str, Callable[[Any], Any]] = {
    "contains": lambda v: f"%{escape_wildcards(str(v))}%",
    "starts_with": lambda v: f"{escape_wildcards(str(v))}%",
    "ends_with": lambda v: f"%{escape_wildcards(str(v))}",
    "boolean": _cast_boolean,
    "negated_boolean": _negate_boolean,
    "blank_values": lambda v: [None, ""],
    "null": lambda v: None,
}

VALIDATORS: dict[str, Callable[[Any], bool]] = {
    "present": is_present,
    "boolean": is_boolean,
    "true": is_true,
}
