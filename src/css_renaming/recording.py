"""Provenance tracking for the renamings a substitution map produces."""
from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Mapping, Optional

from .exceptions import RenamingStateError
from .substitution import (
    InitializableSubstitutionMap,
    MultipleMappingSubstitutionMap,
    SubstitutionMap,
)

logger = logging.getLogger(__name__)

RecordPredicate = Callable[[str], bool]

_CLASS_PART_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def always_record(part: str) -> bool:
    return True


def is_css_class_part(part: str) -> bool:
    """Return ``True`` when *part* looks like a fragment of a CSS class name."""

    return bool(_CLASS_PART_PATTERN.fullmatch(part))


class RecordingSubstitutionMap:
    """Wrap a substitution map and remember every part renaming it hands out.

    When the wrapped map reports part-level renamings (see
    :class:`MultipleMappingSubstitutionMap`), those are recorded instead of the
    whole key, so ``dialog-content`` yields entries for ``dialog`` and ``content``.
    """

    def __init__(self, inner: SubstitutionMap, should_record: RecordPredicate = always_record) -> None:
        self._inner = inner
        self._should_record = should_record
        self._mappings: Dict[str, str] = {}
        self._initialized = False
        self._queried = False

    def get(self, key: str) -> str:
        self._queried = True
        if isinstance(self._inner, MultipleMappingSubstitutionMap):
            result = self._inner.get_value_with_mappings(key)
            for part, renamed in result.mappings:
                self._record(part, renamed)
            return result.value
        value = self._inner.get(key)
        self._record(key, value)
        return value

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        if self._initialized:
            raise RenamingStateError("Recording map has already been initialized with mappings")
        if self._queried:
            raise RenamingStateError("Recording map cannot be initialized after it has been queried")
        if mappings and isinstance(self._inner, InitializableSubstitutionMap):
            self._inner.initialize_with_mappings(mappings)
        self._initialized = True
        self._mappings.update(mappings)
        logger.debug("Recording map initialized with %d mappings", len(mappings))

    def get_mappings(self) -> Dict[str, str]:
        """Return a snapshot of the recorded part renamings in insertion order."""

        return dict(self._mappings)

    def _record(self, part: str, renamed: str) -> None:
        if part in self._mappings or not self._should_record(part):
            return
        self._mappings[part] = renamed

    class Builder:
        """Fluent construction mirroring the options a build pipeline exposes."""

        def __init__(self) -> None:
            self._inner: Optional[SubstitutionMap] = None
            self._should_record: RecordPredicate = always_record
            self._mappings: Dict[str, str] = {}

        def with_substitution_map(self, inner: SubstitutionMap) -> "RecordingSubstitutionMap.Builder":
            self._inner = inner
            return self

        def should_record_mapping_for_code_generation(
            self, predicate: RecordPredicate
        ) -> "RecordingSubstitutionMap.Builder":
            self._should_record = predicate
            return self

        def with_mappings(self, mappings: Mapping[str, str]) -> "RecordingSubstitutionMap.Builder":
            self._mappings.update(mappings)
            return self

        def build(self) -> "RecordingSubstitutionMap":
            if self._inner is None:
                raise RenamingStateError("A substitution map is required to build a recording map")
            recording = RecordingSubstitutionMap(self._inner, self._should_record)
            if self._mappings:
                recording.initialize_with_mappings(self._mappings)
            return recording


__all__ = ["RecordPredicate", "RecordingSubstitutionMap", "always_record", "is_css_class_part"]
