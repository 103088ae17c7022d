# logic/__init__.py

"""Core checking interface.

This package provides:
  • ExpressionCalculator: owns a parsed expression and answers queries
  • EmptyExpression: raised on queries against an empty calculator
  • Verdict: TAUTOLOGY, CONTRADICTION or CONTINGENT
  • checker functions: exhaustive enumeration over truth assignments
"""

from .calculator import EmptyExpression, ExpressionCalculator
from .checker import (
    classify,
    find_counterexample,
    is_contradiction,
    is_tautology,
    iter_assignments,
    truth_table,
)
from .verdict import Verdict

__all__ = [
    "ExpressionCalculator",
    "EmptyExpression",
    "Verdict",
    "classify",
    "find_counterexample",
    "is_contradiction",
    "is_tautology",
    "iter_assignments",
    "truth_table",
]
