# logic/checker.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Brute-force tautology and contradiction checking over truth assignments

"""Tautology and contradiction checking by exhaustive enumeration.

An expression over k distinct variables has 2**k truth assignments. They are
enumerated in canonical order, ``Assignment.from_number(n, variables)`` for n
in ``[0, 2**k)``, so bit 0 of n drives the lowest letter in play. Every check
stops at the first assignment that settles the answer.
"""

from __future__ import annotations
from typing import Iterator, Optional, Tuple

from expression.ast_nodes import Expr
from model.assignment import Assignment
from utils.logger import get_logger
from .verdict import Verdict


def iter_assignments(expr: Expr) -> Iterator[Assignment]:
    """Yield every assignment over exactly the variables occurring in ``expr``."""
    variations = 1 << expr.variables_count
    for number in range(variations):
        yield Assignment.from_number(number, expr.variables)


def truth_table(expr: Expr) -> Iterator[Tuple[Assignment, bool]]:
    """Yield ``(assignment, value)`` rows in canonical order."""
    for assignment in iter_assignments(expr):
        yield assignment, expr.evaluate(assignment)


def find_counterexample(expr: Expr, expected: bool) -> Optional[Assignment]:
    """Return the first assignment under which ``expr`` is not ``expected``.

    Args:
        expr: Expression to check
        expected: Value ``expr`` should take under every assignment

    Returns:
        The first offending assignment, or None if there is none

    Raises:
        InvalidCharacter: ``expr`` references a letter outside A-Z
    """
    logger = get_logger()

    for number, assignment in enumerate(iter_assignments(expr)):
        if expr.evaluate(assignment) != expected:
            logger.debug(
                f"Assignment #{number} {assignment} "
                f"breaks always-{expected}"
            )
            return assignment

    logger.debug(f"All {1 << expr.variables_count} assignments yield {expected}")
    return None


def check_all_assignments(expr: Expr, expected: bool) -> bool:
    """True iff ``expr`` evaluates to ``expected`` under every assignment."""
    return find_counterexample(expr, expected) is None


def is_tautology(expr: Expr) -> bool:
    return check_all_assignments(expr, True)


def is_contradiction(expr: Expr) -> bool:
    return check_all_assignments(expr, False)


def classify(expr: Expr) -> Verdict:
    """Classify ``expr`` in one pass over its assignments.

    Stops as soon as both truth values have been seen.
    """
    seen_true = seen_false = False
    for _, value in truth_table(expr):
        if value:
            seen_true = True
        else:
            seen_false = True
        if seen_true and seen_false:
            return Verdict.CONTINGENT

    return Verdict.TAUTOLOGY if seen_true else Verdict.CONTRADICTION
