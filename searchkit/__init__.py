"""searchkit: search predicate registry and configuration."""

from searchkit.configuration import (
    Configuration,
    Options,
    config,
    configure,
)
from searchkit.errors import (
    PredicateDefinitionError,
    SearchkitError,
    UnknownPredicateError,
)
from searchkit.predicates import Predicate, PredicateRegistry

__all__ = [
    "Configuration",
    "Options",
    "Predicate",
    "PredicateDefinitionError",
    "PredicateRegistry",
    "SearchkitError",
    "UnknownPredicateError",
    "config",
    "configure",
]
