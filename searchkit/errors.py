"""Exception types raised by searchkit."""


class SearchkitError(Exception):
    """Base class for searchkit errors."""


class PredicateDefinitionError(SearchkitError, ValueError):
    """A predicate registration or predicate file entry is malformed."""


class UnknownPredicateError(SearchkitError, KeyError):
    """Raised by subscript lookup of a predicate that is not registered."""
