"""Deterministic renaming of CSS class names for build pipelines."""

from .allocation import MinimalSubstitutionMap
from .config import RenamingConfig, RenamingSession
from .exceptions import (
    RenamingError,
    RenamingMapFormatError,
    RenamingStateError,
    UnknownRenamingTypeError,
)
from .identifiers import IdentifierSequencer
from .mapping_io import RenamingMapFormat, read_renaming_map, write_renaming_map
from .recording import RecordingSubstitutionMap, always_record, is_css_class_part
from .renaming import RenamingType
from .splitting import SplittingSubstitutionMap
from .substitution import (
    IdentitySubstitutionMap,
    InitializableSubstitutionMap,
    MultipleMappingSubstitutionMap,
    PrefixingSubstitutionMap,
    SimpleSubstitutionMap,
    SubstitutionMap,
    SubstitutionMapProvider,
    ValueWithMappings,
)

__all__ = [
    "IdentifierSequencer",
    "IdentitySubstitutionMap",
    "InitializableSubstitutionMap",
    "MinimalSubstitutionMap",
    "MultipleMappingSubstitutionMap",
    "PrefixingSubstitutionMap",
    "RecordingSubstitutionMap",
    "RenamingConfig",
    "RenamingError",
    "RenamingMapFormat",
    "RenamingMapFormatError",
    "RenamingSession",
    "RenamingStateError",
    "RenamingType",
    "SimpleSubstitutionMap",
    "SplittingSubstitutionMap",
    "SubstitutionMap",
    "SubstitutionMapProvider",
    "UnknownRenamingTypeError",
    "ValueWithMappings",
    "always_record",
    "is_css_class_part",
    "read_renaming_map",
    "write_renaming_map",
]
