"""Renaming of hyphen-joined class names one part at a time."""
from __future__ import annotations

from typing import List, Mapping

from .substitution import (
    InitializableSubstitutionMap,
    PartMapping,
    SubstitutionMap,
    ValueWithMappings,
)

DEFAULT_DELIMITER = "-"


class SplittingSubstitutionMap:
    """Split a class name on *delimiter*, rename each part and join them again.

    ``goog-button`` is renamed as ``inner.get("goog") + "-" + inner.get("button")``
    so that names composed at runtime from separately renamed parts still line up.
    """

    def __init__(self, inner: SubstitutionMap, delimiter: str = DEFAULT_DELIMITER) -> None:
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self._inner = inner
        self._delimiter = delimiter

    def get(self, key: str) -> str:
        return self.get_value_with_mappings(key).value

    def get_value_with_mappings(self, key: str) -> ValueWithMappings:
        parts = self._split(key)
        mappings: List[PartMapping] = [(part, self._inner.get(part)) for part in parts]
        value = self._delimiter.join(renamed for _, renamed in mappings)
        return ValueWithMappings(value=value, mappings=mappings)

    def initialize_with_mappings(self, mappings: Mapping[str, str]) -> None:
        if isinstance(self._inner, InitializableSubstitutionMap):
            self._inner.initialize_with_mappings(mappings)

    def _split(self, key: str) -> List[str]:
        if not key:
            raise ValueError("key must be a non-empty string")
        parts = key.split(self._delimiter)
        if not all(parts):
            raise ValueError(f"Class name {key!r} contains an empty part")
        return parts


__all__ = ["DEFAULT_DELIMITER", "SplittingSubstitutionMap"]
