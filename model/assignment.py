# model/assignment.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Truth assignments over the variable letters A-Z

"""
Truth assignment over the 26 variable letters.

Supports:
  •  Letter-keyed get/set with range validation.
  •  Canonical enumeration: ``from_number`` spreads the bits of an integer
     over an ordered set of active letters, least-significant bit first.
"""

from __future__ import annotations
from typing import Collection, Dict, Iterable, List, Mapping, Optional

CHARACTERS_COUNT = 26
LETTERS = tuple(chr(ord("A") + i) for i in range(CHARACTERS_COUNT))


class InvalidCharacter(ValueError):
    """Raised when a letter outside A-Z is used as a variable name."""

    def __init__(self, character: object):
        super().__init__(f"Invalid character {character!r}: expected a letter in A-Z")
        self.character = character


class Assignment:
    """Fixed-size mapping from each letter A-Z to a boolean value.

    Only the letters referenced by an expression are meaningful; values for
    the rest are left at False and ignored by evaluation.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, bool]] = None):
        self._values: List[bool] = [False] * CHARACTERS_COUNT
        if values:
            for ch, value in values.items():
                self.set(ch, value)

    @staticmethod
    def is_valid_letter(ch: object) -> bool:
        """True iff ``ch`` is a single character in A..Z."""
        return isinstance(ch, str) and len(ch) == 1 and "A" <= ch <= "Z"

    @classmethod
    def from_number(cls, number: int, active: Collection[str]) -> Assignment:
        """
        Build the assignment encoded by ``number`` over the ``active`` letters.

        Active letters are visited in ascending order; each takes the current
        least-significant bit of ``number``, which is then shifted right.
        Inactive letters stay False. This is a bijection between
        ``[0, 2**len(active))`` and the combinations over the active letters.
        """
        if number < 0:
            raise ValueError(f"Assignment number must be non-negative, got {number}")

        result = cls()
        for index, letter in enumerate(LETTERS):
            if letter in active:
                if number & 1:
                    result._values[index] = True
                number >>= 1
        return result

    @staticmethod
    def _index(ch: object) -> int:
        if not Assignment.is_valid_letter(ch):
            raise InvalidCharacter(ch)
        return ord(ch) - ord("A")  # type: ignore[arg-type]

    def get(self, ch: str) -> bool:
        return self._values[self._index(ch)]

    def set(self, ch: str, value: bool) -> None:
        self._values[self._index(ch)] = bool(value)

    def letters(self) -> List[str]:
        """Letters currently set to True, in ascending order."""
        return [letter for letter, value in zip(LETTERS, self._values) if value]

    def as_dict(self, letters: Iterable[str]) -> Dict[str, bool]:
        """Values of the given letters, keyed by letter, in ascending order."""
        return {ch: self.get(ch) for ch in sorted(letters)}

    def format(self, letters: Iterable[str]) -> str:
        """Compact ``A=1 B=0`` rendering restricted to ``letters``."""
        return " ".join(f"{ch}={int(value)}" for ch, value in self.as_dict(letters).items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Assignment):
            return NotImplemented
        return self._values == other._values

    def __str__(self) -> str:
        return "{" + ", ".join(self.letters()) + "}"

    def __repr__(self) -> str:
        return f"Assignment({self.letters()!r})"
