"""The closed set of renaming modes a build can be configured with."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Mapping, Optional

from .allocation import MinimalSubstitutionMap
from .exceptions import UnknownRenamingTypeError
from .splitting import SplittingSubstitutionMap
from .substitution import (
    IdentitySubstitutionMap,
    SimpleSubstitutionMap,
    SubstitutionMap,
    SubstitutionMapProvider,
)

_ALIASES = {"closure": "compact"}


class RenamingType(Enum):
    """How CSS class names are rewritten.

    ``NONE`` leaves names untouched, ``DEBUG`` appends ``_`` to every part and
    ``COMPACT`` replaces every part with the shortest available token.
    """

    NONE = "none"
    DEBUG = "debug"
    COMPACT = "compact"

    @classmethod
    def from_name(cls, name: str) -> "RenamingType":
        """Resolve a configured mode name such as ``"debug"`` or ``"COMPACT"``."""

        normalised = name.strip().lower()
        normalised = _ALIASES.get(normalised, normalised)
        for member in cls:
            if member.value == normalised:
                return member
        raise UnknownRenamingTypeError(name, tuple(member.value for member in cls))

    def create_substitution_map(
        self,
        seed: Optional[Mapping[str, str]] = None,
        excluded_tokens: Iterable[str] = (),
    ) -> SubstitutionMap:
        if self is RenamingType.NONE:
            return IdentitySubstitutionMap()
        if self is RenamingType.DEBUG:
            return SplittingSubstitutionMap(SimpleSubstitutionMap())
        return SplittingSubstitutionMap(MinimalSubstitutionMap(seed=seed, excluded_tokens=excluded_tokens))

    def get_css_substitution_map_provider(
        self,
        seed: Optional[Mapping[str, str]] = None,
        excluded_tokens: Iterable[str] = (),
    ) -> SubstitutionMapProvider:
        """Return a provider building a fresh map of this type per compilation."""

        frozen_seed = dict(seed or {})
        frozen_excluded = tuple(excluded_tokens)
        return SubstitutionMapProvider(
            lambda: self.create_substitution_map(seed=frozen_seed, excluded_tokens=frozen_excluded)
        )


__all__ = ["RenamingType"]
