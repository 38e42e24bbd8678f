"""Allocation of short, collision-free tokens to class name parts."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional, Set

from .exceptions import RenamingStateError
from .identifiers import IdentifierSequencer

logger = logging.getLogger(__name__)


class MinimalSubstitutionMap:
    """Rename each part to the shortest token not already bound to another part.

    Parts are assigned tokens in the order they are first seen. Tokens found in
    a seed mapping or in *excluded_tokens* are reserved up front, so a fresh
    assignment never reuses them even if their seeded part is never queried.
    """

    def __init__(
        self,
        seed: Optional[Mapping[str, str]] = None,
        excluded_tokens: Iterable[str] = (),
        sequencer: Optional[IdentifierSequencer] = None,
    ) -> None:
        self._sequencer = sequencer or IdentifierSequencer()
        self._assignments: Dict[str, str] = {}
        self._reserved: Set[str] = set(excluded_tokens)
        if seed:
            self._seed(seed)

    @property
    def mappings(self) -> Dict[str, str]:
        """Return a copy of the part to token assignments made so far."""

        return dict(self._assignments)

    def get(self, key: str) -> str:
        if not key:
            raise ValueError("key must be a non-empty string")
        token = self._assignments.get(key)
        if token is None:
            token = self._sequencer.next(self._reserved)
            self._assignments[key] = token
            self._reserved.add(token)
            logger.debug("Assigned token %r to %r", token, key)
        return token

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        if self._assignments:
            raise RenamingStateError("Cannot seed a substitution map that already holds assignments")
        self._seed(mappings)

    def _seed(self, mappings: Mapping[str, str]) -> None:
        for key, value in mappings.items():
            if not key or not value:
                raise ValueError(f"Seed mappings must be non-empty strings, got {key!r}: {value!r}")
            self._assignments[key] = value
            self._reserved.add(value)
        logger.debug("Seeded substitution map with %d mappings", len(mappings))


__all__ = ["MinimalSubstitutionMap"]
