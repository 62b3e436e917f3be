"""Process-wide search configuration.

One ``Configuration`` owns the predicate registry and the options that the
query builder and renderer read. Host code mutates it through ``configure``:

    import searchkit

    def setup(config):
        config.add_predicate("equals_ci", arel_predicate="matches", case_insensitive=True)
        config.search_key = "query"
        config.custom_arrows = {"up_arrow": "<i class='up'></i>"}

    searchkit.configure(setup)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Callable

from searchkit.predicates.loader import register_defaults
from searchkit.predicates.registry import Predicate, PredicateRegistry

logger = logging.getLogger(__name__)

ARROW_KEYS = ("up_arrow", "down_arrow")


@dataclass
class Options:
    """Global search options.

    Named fields hold the documented options. Any other key is kept in
    ``extra`` so renderers can read settings this package doesn't know about.
    """

    search_key: str = "q"
    up_arrow: str = "&#9660;"
    down_arrow: str = "&#9650;"
    default_arrow: str | None = None
    ignore_unknown_conditions: bool = True
    hide_sort_order_indicators: bool = False
    strip_whitespace: bool = True
    sanitize_scope_args: bool = True
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def known_keys(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name != "extra")

    def __getitem__(self, key: str) -> Any:
        key = str(key)
        if key in self.known_keys():
            return getattr(self, key)
        return self.extra[key]

    def __contains__(self, key: object) -> bool:
        return str(key) in self.known_keys() or str(key) in self.extra

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def set(self, key: str, value: Any) -> None:
        """Store an option. Unknown keys go to ``extra`` without validation."""
        key = str(key)
        if key in self.known_keys():
            setattr(self, key, value)
        else:
            self.extra[key] = value

    def copy(self) -> Options:
        return replace(self, extra=dict(self.extra))

    def to_dict(self) -> dict[str, Any]:
        data = {key: getattr(self, key) for key in self.known_keys()}
        data.update(self.extra)
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Options:
        """Build Options from a flat mapping; missing keys take defaults."""
        options = cls()
        for key, value in data.items():
            options.set(key, value)
        return options


def _option_property(name: str) -> property:
    def getter(self: Configuration) -> Any:
        return getattr(self._options, name)

    def setter(self: Configuration, value: Any) -> None:
        self.set_option(name, value)

    return property(getter, setter, doc=f"The ``{name}`` option.")


class Configuration:
    """Owner of the predicate registry and global options."""

    def __init__(
        self,
        registry: PredicateRegistry | None = None,
        options: Options | None = None,
        load_defaults: bool = True,
        defaults_path: Path | None = None,
    ) -> None:
        self._load_defaults = load_defaults
        self._defaults_path = defaults_path
        self._options = options.copy() if options is not None else Options()
        if registry is None:
            registry = PredicateRegistry()
            if load_defaults:
                register_defaults(registry, defaults_path)
        self._predicates = registry

    def configure(self, mutator: Callable[[Configuration], Any]) -> None:
        """Call ``mutator`` with this configuration. Its return value is dropped."""
        mutator(self)

    # -- Predicates --

    @property
    def predicates(self) -> PredicateRegistry:
        return self._predicates

    def add_predicate(self, name: Any, **attributes: Any) -> Predicate:
        """Register a predicate; see ``PredicateRegistry.register``."""
        return self._predicates.register(name, **attributes)

    # -- Options --

    @property
    def options(self) -> Options:
        return self._options

    @options.setter
    def options(self, value: Options | Mapping[str, Any]) -> None:
        self.restore_options(value)

    search_key = _option_property("search_key")
    default_arrow = _option_property("default_arrow")
    ignore_unknown_conditions = _option_property("ignore_unknown_conditions")
    hide_sort_order_indicators = _option_property("hide_sort_order_indicators")
    strip_whitespace = _option_property("strip_whitespace")
    sanitize_scope_args = _option_property("sanitize_scope_args")

    def set_option(self, name: str, value: Any) -> None:
        self._options.set(name, value)
        logger.debug("Option %s set to %r", name, value)

    @property
    def custom_arrows(self) -> dict[str, str]:
        return {key: getattr(self._options, key) for key in ARROW_KEYS}

    @custom_arrows.setter
    def custom_arrows(self, partial: Mapping[str, Any]) -> None:
        self.set_custom_arrows(partial)

    def set_custom_arrows(self, partial: Mapping[str, Any]) -> None:
        """Merge arrow overrides key by key.

        Arrows missing from ``partial`` keep their current value, including
        values set by earlier calls.
        """
        for key, value in partial.items():
            key = str(key)
            if key not in ARROW_KEYS:
                logger.warning("Ignoring unknown custom arrow %r", key)
                continue
            self.set_option(key, value)

    def options_snapshot(self) -> Options:
        return self._options.copy()

    def restore_options(self, snapshot: Options | Mapping[str, Any]) -> None:
        """Replace all options at once with a copy of ``snapshot``."""
        if isinstance(snapshot, Options):
            self._options = snapshot.copy()
        else:
            self._options = Options.from_mapping(snapshot)

    def reset(self) -> None:
        """Restore default options and rebuild the predicate registry."""
        self._options = Options()
        self._predicates.clear()
        if self._load_defaults:
            register_defaults(self._predicates, self._defaults_path)


config = Configuration()


def configure(mutator: Callable[[Configuration], Any]) -> None:
    """Mutate the shared configuration; see ``Configuration.configure``."""
    config.configure(mutator)


def predicates() -> PredicateRegistry:
    return config.predicates


def options() -> Options:
    return config.options
