"""Deterministic generation of short replacement identifiers."""
from __future__ import annotations

from typing import AbstractSet

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class IdentifierSequencer:
    """Yield the shortest unused identifiers in a stable order.

    Identifiers are ordered by length first and alphabetically within a
    length, i.e. bijective base-N over *alphabet*: ``a .. z, aa .. az, ba ..``.
    """

    def __init__(self, alphabet: str = DEFAULT_ALPHABET) -> None:
        if not alphabet:
            raise ValueError("alphabet must be a non-empty string")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError(f"alphabet contains repeated characters: {alphabet!r}")
        self._alphabet = alphabet
        self._counter = 0

    def token_at(self, index: int) -> str:
        """Return the identifier at zero-based *index* of the sequence."""

        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")
        base = len(self._alphabet)
        chars = []
        while True:
            chars.append(self._alphabet[index % base])
            index = index // base - 1
            if index < 0:
                break
        return "".join(reversed(chars))

    def next(self, reserved: AbstractSet[str] = frozenset()) -> str:
        """Return the next identifier in sequence that is not in *reserved*.

        Reserved identifiers skipped on the way are consumed along with the one
        returned, so a later call never goes back to them even if they are no
        longer reserved.
        """

        while True:
            candidate = self.token_at(self._counter)
            self._counter += 1
            if candidate not in reserved:
                return candidate


__all__ = ["DEFAULT_ALPHABET", "IdentifierSequencer"]
