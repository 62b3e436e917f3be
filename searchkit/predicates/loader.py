"""Predicate set loader: reads predicate definitions from YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from searchkit.errors import PredicateDefinitionError
from searchkit.predicates.formatters import FORMATTERS, VALIDATORS
from searchkit.predicates.registry import PredicateRegistry

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"

_ALLOWED_KEYS = {
    "arel_predicate",
    "compounds",
    "wants_array",
    "type",
    "case_insensitive",
    "formatter",
    "validator",
}


def load_predicates(path: Path | None = None) -> dict[str, dict[str, Any]]:
    """Load predicate definitions from YAML, keyed by predicate name.

    If no path is given, loads the default set shipped with the package.
    Formatter and validator names are resolved to callables; an entry
    without an arel_predicate compiles to the operator of the same name.
    """
    if path is None:
        path = DEFAULTS_PATH

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    definitions: dict[str, dict[str, Any]] = {}
    for name, props in (data.get("predicates") or {}).items():
        props = dict(props or {})
        unknown = set(props) - _ALLOWED_KEYS
        if unknown:
            raise PredicateDefinitionError(
                f"Predicate {name!r} has unknown attributes: {sorted(unknown)}"
            )
        props.setdefault("arel_predicate", str(name))
        if "formatter" in props:
            props["formatter"] = _resolve(name, "formatter", props["formatter"], FORMATTERS)
        if "validator" in props:
            props["validator"] = _resolve(name, "validator", props["validator"], VALIDATORS)
        definitions[str(name)] = props

    return definitions


def register_defaults(
    registry: PredicateRegistry, path: Path | None = None
) -> PredicateRegistry:
    """Register every predicate from a YAML set into ``registry``."""
    definitions = load_predicates(path)
    for name, props in definitions.items():
        registry.register(name, **props)
    logger.info(
        "Loaded %d predicates from %s (%d entries with compounds)",
        len(definitions), path or DEFAULTS_PATH, len(registry),
    )
    return registry


def _resolve(predicate: str, kind: str, ref: Any, table: dict[str, Any]) -> Any:
    if ref is None:
        return None
    try:
        return table[ref]
    except (KeyError, TypeError):
        raise PredicateDefinitionError(
            f"Predicate {predicate!r} refers to unknown {kind} {ref!r}"
        ) from None
