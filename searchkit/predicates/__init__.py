"""Search predicates: definitions, registry, named formatters, and YAML loader."""

from searchkit.predicates.formatters import FORMATTERS, VALIDATORS
from searchkit.predicates.loader import load_predicates, register_defaults
from searchkit.predicates.registry import Predicate, PredicateRegistry

__all__ = [
    "FORMATTERS",
    "Predicate",
    "PredicateRegistry",
    "VALIDATORS",
    "load_predicates",
    "register_defaults",
]
