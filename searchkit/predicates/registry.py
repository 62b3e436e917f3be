"""Predicate definitions and the registry that owns them."""

from __future__ import annotations

import logging
from collections.abc import KeysView
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable

from searchkit.errors import PredicateDefinitionError, UnknownPredicateError
from searchkit.predicates.formatters import is_present

logger = logging.getLogger(__name__)

ARRAY_AREL_PREDICATES = frozenset({"in", "not_in"})
COMPOUND_SUFFIXES = ("any", "all")


@dataclass(frozen=True)
class Predicate:
    """A named search predicate.

    ``compound`` is None for a base predicate and "any" or "all" for the
    variants derived from it.
    """

    name: str
    arel_predicate: str | None = None
    wants_array: bool = False
    compound: str | None = None
    type: str | None = None
    case_insensitive: bool = False
    formatter: Callable[[Any], Any] | None = None
    validator: Callable[[Any], bool] | None = None

    def format(self, value: Any) -> Any:
        """Apply the formatter to a search value (identity when unset)."""
        if self.formatter is None:
            return value
        return self.formatter(value)

    def validate(self, value: Any) -> bool:
        """Check a search value. Without a validator, any present value passes."""
        if self.validator is None:
            return is_present(value)
        return bool(self.validator(value))


def resolve_wants_array(arel_predicate: str | None, wants_array: bool | None) -> bool:
    """Explicit wants_array wins; otherwise in/not_in imply an array."""
    if wants_array is not None:
        return bool(wants_array)
    return arel_predicate in ARRAY_AREL_PREDICATES


class PredicateRegistry:
    """Predicates keyed by name.

    Compound variants are derived eagerly at registration so lookups are a
    single dict access.
    """

    def __init__(self) -> None:
        self._predicates: dict[str, Predicate] = {}

    def register(
        self,
        name: Any,
        *,
        arel_predicate: str | None = None,
        compounds: bool | None = True,
        wants_array: bool | None = None,
        type: str | None = None,
        case_insensitive: bool = False,
        formatter: Callable[[Any], Any] | None = None,
        validator: Callable[[Any], bool] | None = None,
    ) -> Predicate:
        """Register (or overwrite) a predicate and its _any/_all variants.

        An explicit ``wants_array=True`` suppresses compound variants.
        Re-registering with compounds off leaves older variants in place.
        """
        key = _predicate_key(name)
        if wants_array is not None and not isinstance(wants_array, bool):
            raise PredicateDefinitionError(
                f"Predicate {key!r}: wants_array must be True, False or None, got {wants_array!r}"
            )
        if compounds is None:
            compounds = True
        if wants_array is True:
            compounds = False

        predicate = Predicate(
            name=key,
            arel_predicate=arel_predicate,
            wants_array=resolve_wants_array(arel_predicate, wants_array),
            type=type,
            case_insensitive=case_insensitive,
            formatter=formatter,
            validator=validator,
        )
        self._predicates[key] = predicate

        if compounds:
            for suffix in COMPOUND_SUFFIXES:
                derived = replace(predicate, name=f"{key}_{suffix}", compound=suffix)
                self._predicates[derived.name] = derived

        logger.debug(
            "Registered predicate %s (arel=%s, wants_array=%s, compounds=%s)",
            key, arel_predicate, predicate.wants_array, bool(compounds),
        )
        return predicate

    def lookup(self, name: str) -> Predicate | None:
        """Get a predicate by name. Returns None if not registered."""
        return self._predicates.get(_normalize_name(name))

    def names(self) -> KeysView[str]:
        """Live view of all registered names; iterable any number of times."""
        return self._predicates.keys()

    all_names = names

    def detect(self, key: str) -> str | None:
        """Find the longest registered predicate name ``key`` ends with.

        ``"name_not_eq"`` detects ``not_eq`` rather than ``eq``. Only the
        ``_<predicate>`` suffix counts, so an attribute part must be present.
        """
        best: str | None = None
        for name in self._predicates:
            if (
                len(key) > len(name) + 1
                and key.endswith(f"_{name}")
                and (best is None or len(name) > len(best))
            ):
                best = name
        return best

    def split(self, key: str) -> tuple[str, Predicate] | None:
        """Split ``attribute_predicate`` into its attribute and Predicate."""
        name = self.detect(key)
        if name is None:
            return None
        return key[: -(len(name) + 1)], self._predicates[name]

    def copy(self) -> PredicateRegistry:
        clone = PredicateRegistry()
        clone._predicates = dict(self._predicates)
        return clone

    def restore(self, snapshot: PredicateRegistry) -> None:
        """Replace every entry with those of ``snapshot`` (from ``copy()``)."""
        self._predicates = dict(snapshot._predicates)

    def clear(self) -> None:
        self._predicates.clear()

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Serializable summary of every entry (callables omitted)."""
        return {
            name: {
                "arel_predicate": p.arel_predicate,
                "wants_array": p.wants_array,
                "compound": p.compound,
                "type": p.type,
                "case_insensitive": p.case_insensitive,
            }
            for name, p in self._predicates.items()
        }

    def __getitem__(self, name: str) -> Predicate:
        predicate = self.lookup(name)
        if predicate is None:
            raise UnknownPredicateError(name)
        return predicate

    def __contains__(self, name: object) -> bool:
        return _normalize_name(name) in self._predicates

    def __iter__(self):
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)


def _normalize_name(name: Any) -> str:
    if isinstance(name, Enum):
        name = name.value
    return str(name).strip()


def _predicate_key(name: Any) -> str:
    if name is None or isinstance(name, bool):
        raise PredicateDefinitionError(f"Predicate name is required, got {name!r}")
    key = _normalize_name(name)
    if not key:
        raise PredicateDefinitionError("Predicate name must not be empty")
    return key
