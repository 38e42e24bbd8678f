"""Configuration of a renaming session for one compilation."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .allocation import MinimalSubstitutionMap
from .mapping_io import RenamingMapFormat, read_renaming_map, write_renaming_map
from .recording import RecordPredicate, RecordingSubstitutionMap, always_record
from .renaming import RenamingType
from .splitting import SplittingSubstitutionMap
from .substitution import (
    IdentitySubstitutionMap,
    PrefixingSubstitutionMap,
    SimpleSubstitutionMap,
    SubstitutionMap,
)

logger = logging.getLogger(__name__)


@dataclass
class RenamingConfig:
    """Describe how class names are renamed and where mappings are persisted."""

    mode: Union[RenamingType, str] = RenamingType.NONE
    input_map: Optional[Path] = None
    output_map: Optional[Path] = None
    map_format: Optional[Union[RenamingMapFormat, str]] = None
    prefix: str = ""
    excluded_tokens: Tuple[str, ...] = ()
    should_record: RecordPredicate = field(default=always_record)

    def __post_init__(self) -> None:
        if isinstance(self.mode, str):
            self.mode = RenamingType.from_name(self.mode)
        if self.input_map is not None:
            self.input_map = Path(self.input_map)
        if self.output_map is not None:
            self.output_map = Path(self.output_map)
        self.excluded_tokens = tuple(self.excluded_tokens)


class RenamingSession:
    """Own the substitution map of a single compilation and its provenance."""

    def __init__(self, config: RenamingConfig) -> None:
        self._config = config
        self.substitution_map = RecordingSubstitutionMap(self._build_inner(), config.should_record)
        if config.input_map is not None:
            seed = read_renaming_map(config.input_map, config.map_format)
            self.substitution_map.initialize_with_mappings(seed)
            logger.info("Seeded %s renaming from %s (%d entries)", config.mode.value, config.input_map, len(seed))

    @property
    def mappings(self) -> Dict[str, str]:
        return self.substitution_map.get_mappings()

    def rename(self, class_name: str) -> str:
        return self.substitution_map.get(class_name)

    def rename_all(self, class_names: Iterable[str]) -> List[str]:
        return [self.substitution_map.get(name) for name in class_names]

    def write_output_map(self) -> Optional[Path]:
        """Persist the recorded mappings to the configured output path, if any."""

        if self._config.output_map is None:
            return None
        path = write_renaming_map(self._config.output_map, self.mappings, self._config.map_format)
        logger.info("Wrote %d renaming entries to %s", len(self.mappings), path)
        return path

    def _build_inner(self) -> SubstitutionMap:
        mode = self._config.mode
        prefix = self._config.prefix
        if not prefix:
            return mode.create_substitution_map(excluded_tokens=self._config.excluded_tokens)
        if mode is RenamingType.NONE:
            return PrefixingSubstitutionMap(IdentitySubstitutionMap(), prefix)
        if mode is RenamingType.DEBUG:
            part_map: SubstitutionMap = SimpleSubstitutionMap()
        else:
            part_map = MinimalSubstitutionMap(excluded_tokens=self._config.excluded_tokens)
        return SplittingSubstitutionMap(PrefixingSubstitutionMap(part_map, prefix))


__all__ = ["RenamingConfig", "RenamingSession"]
