"""Exceptions raised by the renaming subsystem."""
from __future__ import annotations


class RenamingError(Exception):
    """Base class for renaming failures."""


class UnknownRenamingTypeError(RenamingError, ValueError):
    """Raised when a renaming mode name does not match any known mode."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        message = f"Unknown renaming type '{name}'"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)
        self.name = name


class RenamingStateError(RenamingError, RuntimeError):
    """Raised when a substitution map is used out of order, e.g. seeded twice."""


class RenamingMapFormatError(RenamingError, ValueError):
    """Raised when a renaming map file cannot be parsed."""


__all__ = [
    "RenamingError",
    "RenamingMapFormatError",
    "RenamingStateError",
    "UnknownRenamingTypeError",
]
