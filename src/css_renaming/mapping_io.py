"""Reading and writing renaming maps shared between compilations."""
from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from .exceptions import RenamingMapFormatError

try:
    import orjson  # type: ignore[import-untyped]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None

logger = logging.getLogger(__name__)


class RenamingMapFormat(Enum):
    JSON = "json"
    PROPERTIES = "properties"

    @classmethod
    def for_path(cls, path: Path) -> "RenamingMapFormat":
        """Infer the format from the suffix of *path*."""

        suffix = path.suffix.lower().lstrip(".")
        for member in cls:
            if member.value == suffix:
                return member
        raise RenamingMapFormatError(f"Cannot infer renaming map format from {path}")


def _json_loads(text: str) -> object:
    if orjson is not None:
        return orjson.loads(text)
    return json.loads(text)


def _json_dumps(mapping: Mapping[str, str]) -> str:
    if orjson is not None:
        return orjson.dumps(dict(mapping), option=orjson.OPT_INDENT_2).decode("utf-8") + "\n"
    return json.dumps(dict(mapping), indent=2, ensure_ascii=False) + "\n"


def parse_json_map(text: str, source: str = "<string>") -> Dict[str, str]:
    try:
        document = _json_loads(text)
    except ValueError as exc:
        raise RenamingMapFormatError(f"{source}: invalid JSON renaming map: {exc}") from exc
    if not isinstance(document, dict):
        raise RenamingMapFormatError(f"{source}: renaming map must be a JSON object")
    mapping: Dict[str, str] = {}
    for key, value in document.items():
        if not isinstance(value, str) or not key or not value:
            raise RenamingMapFormatError(f"{source}: invalid entry {key!r}: {value!r}")
        mapping[key] = value
    return mapping


def parse_properties_map(text: str, source: str = "<string>") -> Dict[str, str]:
    mapping: Dict[str, str] = {}
    for line_number, original_line in enumerate(text.splitlines(), start=1):
        line = original_line.strip()
        if not line or line.startswith("#"):
            continue
        key, separator, value = line.partition("=")
        key = key.strip()
        value = value.strip()
        if not separator or not key or not value:
            raise RenamingMapFormatError(f"{source}:{line_number}: expected 'name=token', got {original_line!r}")
        mapping[key] = value
    return mapping


def format_properties_map(mapping: Mapping[str, str]) -> str:
    return "".join(f"{key}={value}\n" for key, value in mapping.items())


def read_renaming_map(path: Path, fmt: Optional[Union[RenamingMapFormat, str]] = None) -> Dict[str, str]:
    """Load the renaming map stored at *path*, preserving entry order."""

    resolved = _resolve_format(path, fmt)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise RenamingMapFormatError(f"{path}: renaming map is not valid UTF-8: {exc}") from exc
    if resolved is RenamingMapFormat.JSON:
        mapping = parse_json_map(text, source=str(path))
    else:
        mapping = parse_properties_map(text, source=str(path))
    logger.debug("Read %d renaming entries from %s", len(mapping), path)
    return mapping


def write_renaming_map(
    path: Path,
    mapping: Mapping[str, str],
    fmt: Optional[Union[RenamingMapFormat, str]] = None,
) -> Path:
    """Write *mapping* to *path* in the requested or inferred format."""

    resolved = _resolve_format(path, fmt)
    if resolved is RenamingMapFormat.JSON:
        text = _json_dumps(mapping)
    else:
        text = format_properties_map(mapping)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d renaming entries to %s", len(mapping), path)
    return path


def _resolve_format(path: Path, fmt: Optional[Union[RenamingMapFormat, str]]) -> RenamingMapFormat:
    if fmt is None:
        return RenamingMapFormat.for_path(path)
    if isinstance(fmt, RenamingMapFormat):
        return fmt
    try:
        return RenamingMapFormat(fmt.strip().lower())
    except ValueError as exc:
        raise RenamingMapFormatError(f"Unknown renaming map format '{fmt}'") from exc


__all__ = [
    "RenamingMapFormat",
    "format_properties_map",
    "parse_json_map",
    "parse_properties_map",
    "read_renaming_map",
    "write_renaming_map",
]
