# logic/verdict.py

"""
Verdict enumeration for the checker, capturing the three possible
classifications of a propositional expression over all its assignments.
"""

from enum import Enum, auto


class Verdict(Enum):
    """Three-way classification of an expression."""
    TAUTOLOGY = auto()  # true under every assignment
    CONTRADICTION = auto()  # false under every assignment
    CONTINGENT = auto()  # true under some assignments, false under others
