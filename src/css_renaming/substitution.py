"""Substitution map contracts and the stateless map implementations."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Protocol, Tuple, runtime_checkable

from .exceptions import RenamingMapFormatError

PartMapping = Tuple[str, str]


@runtime_checkable
class SubstitutionMap(Protocol):
    """Anything that renames a CSS class name."""

    def get(self, key: str) -> str:
        ...


@runtime_checkable
class InitializableSubstitutionMap(Protocol):
    """A substitution map that accepts renamings bound before the first query."""

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        ...


@dataclass(frozen=True)
class ValueWithMappings:
    """The renamed value of a key plus the part renamings that produced it."""

    value: str
    mappings: List[PartMapping] = field(default_factory=list)


@runtime_checkable
class MultipleMappingSubstitutionMap(Protocol):
    """A substitution map that reports the part-level renamings of each call."""

    def get(self, key: str) -> str:
        ...

    def get_value_with_mappings(self, key: str) -> ValueWithMappings:
        ...


class IdentitySubstitutionMap:
    """Return every key unchanged."""

    def get(self, key: str) -> str:
        return key


class SimpleSubstitutionMap:
    """Append a fixed marker to each part, making renamed names easy to spot."""

    def __init__(self, marker: str = "_") -> None:
        if not marker:
            raise ValueError("marker must be a non-empty string")
        self._marker = marker

    def get(self, key: str) -> str:
        return key + self._marker


class PrefixingSubstitutionMap:
    """Prepend *prefix* to every value produced by an inner part-level map."""

    def __init__(self, inner: SubstitutionMap, prefix: str) -> None:
        self._inner = inner
        self._prefix = prefix

    def get(self, key: str) -> str:
        return self._prefix + self._inner.get(key)

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        """Seed the inner map with *mappings* whose values all carry the prefix."""

        stripped: Dict[str, str] = {}
        for key, value in mappings.items():
            if not value.startswith(self._prefix) or len(value) == len(self._prefix):
                raise RenamingMapFormatError(
                    f"Seed entry {key!r}: {value!r} does not extend the renaming prefix {self._prefix!r}"
                )
            stripped[key] = value[len(self._prefix):]
        if isinstance(self._inner, InitializableSubstitutionMap):
            self._inner.initialize_with_mappings(stripped)


class SubstitutionMapProvider:
    """Factory handing out an independent substitution map per compilation."""

    def __init__(self, factory: Callable[[], SubstitutionMap]) -> None:
        self._factory = factory

    def get(self) -> SubstitutionMap:
        return self._factory()


__all__ = [
    "IdentitySubstitutionMap",
    "InitializableSubstitutionMap",
    "MultipleMappingSubstitutionMap",
    "PartMapping",
    "PrefixingSubstitutionMap",
    "SimpleSubstitutionMap",
    "SubstitutionMap",
    "SubstitutionMapProvider",
    "ValueWithMappings",
]
