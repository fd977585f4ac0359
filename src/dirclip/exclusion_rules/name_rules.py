"""Exclusion by literal entry name."""

import posixpath
from typing import AbstractSet, FrozenSet, Iterable

from .base_rules import BaseExclusionRules

DEFAULT_EXCLUDE: FrozenSet[str] = frozenset({"node_modules", ".git", ".idea"})


def is_excluded(entry_name: str, exclusion_set: AbstractSet[str]) -> bool:
    """Return True if a directory entry's base name is in the exclusion set.

    Matching is exact and case-sensitive; names are not patterns.

    Example:
        >>> is_excluded("node_modules", DEFAULT_EXCLUDE)
        True
        >>> is_excluded("Node_Modules", DEFAULT_EXCLUDE)
        False
        >>> is_excluded("*.js", {"a.js"})
        False
    """
    return entry_name in exclusion_set


def parse_exclusion_list(value: str) -> FrozenSet[str]:
    """Split a comma-separated list of names into an exclusion set.

    Names are kept literally (no whitespace stripping); empty items are dropped.

    Example:
        >>> sorted(parse_exclusion_list("dist,.venv"))
        ['.venv', 'dist']
        >>> sorted(parse_exclusion_list("a,,b,"))
        ['a', 'b']
    """
    return frozenset(name for name in value.split(",") if name)


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules matching the base name of each entry against a fixed set of names.

    The set is frozen at construction time. A user-supplied set replaces the
    defaults rather than extending them: `NameExclusionRules(["custom"])` no longer
    excludes `node_modules`.

    Attributes:
        names (FrozenSet[str]): The literal names being excluded.

    Example:
        >>> rules = NameExclusionRules()
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("pkg/node_modules")
        True
        >>> rules.exclude("src/app.js")
        False
        >>> NameExclusionRules(["custom"]).exclude("node_modules")
        False
    """

    def __init__(self, names: Iterable[str] = DEFAULT_EXCLUDE) -> None:
        self._names = frozenset(names)

    @property
    def names(self) -> FrozenSet[str]:
        return self._names

    def exclude(self, path: str) -> bool:
        return is_excluded(posixpath.basename(path.rstrip("/")), self._names)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self._names)!r})"
