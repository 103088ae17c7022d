# model/__init__.py

"""
Domain objects for truth assignments over the variable letters A-Z.
These types support evaluation and enumeration without pulling in
parsing or checking logic.
"""

from .assignment import (
    Assignment,
    InvalidCharacter,
    CHARACTERS_COUNT,
    LETTERS,
)

__all__ = [
    "Assignment",
    "InvalidCharacter",
    "CHARACTERS_COUNT",
    "LETTERS",
]
