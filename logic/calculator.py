# logic/calculator.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Top-level handle owning one parsed expression tree

"""Expression calculator: owns one expression tree and answers queries on it.

A calculator built from an empty string, or one whose tree has been moved
out, owns nothing; every query on it raises EmptyExpression.

Ownership follows copy/move semantics:
  • ``copy()`` / ``copy.copy`` / ``copy.deepcopy`` clone the tree.
  • ``assign(other)`` drops the current tree and clones ``other``'s.
  • ``take(other)`` and ``moved_from(other)`` transfer ``other``'s tree and
    leave ``other`` empty.
"""

from __future__ import annotations
from typing import Iterator, Optional, Tuple

from expression import parse
from expression.ast_nodes import Expr
from model.assignment import Assignment
from utils.logger import get_logger
from . import checker
from .verdict import Verdict


class EmptyExpression(RuntimeError):
    """Raised when a query runs on a calculator that owns no expression."""

    pass


class ExpressionCalculator:
    """Parses an expression once and checks it for tautology/contradiction.

    Attributes:
        _expression: Owned expression tree, or None
    """

    def __init__(self, text: str = ""):
        """Parse ``text`` and take ownership of the resulting tree.

        Raises:
            ParseError: ``text`` is non-empty and malformed
        """
        self._expression: Optional[Expr] = parse(text)

    @classmethod
    def moved_from(cls, other: ExpressionCalculator) -> ExpressionCalculator:
        """Build a calculator that takes over ``other``'s tree."""
        result = cls()
        result.take(other)
        return result

    @property
    def expression(self) -> Optional[Expr]:
        return self._expression

    @property
    def is_empty(self) -> bool:
        return self._expression is None

    def copy(self) -> ExpressionCalculator:
        """Return an independent calculator holding a deep clone of the tree."""
        result = type(self)()
        result.assign(self)
        return result

    __copy__ = copy

    def __deepcopy__(self, memo) -> ExpressionCalculator:
        return self.copy()

    def assign(self, other: ExpressionCalculator) -> ExpressionCalculator:
        """Release the current tree and own a clone of ``other``'s."""
        if other is not self:
            self.release()
            if other._expression is not None:
                self._expression = other._expression.clone()
        return self

    def take(self, other: ExpressionCalculator) -> ExpressionCalculator:
        """Release the current tree and take ``other``'s, leaving it empty."""
        if other is not self:
            self.release()
            self._expression = other.release()
        return self

    def release(self) -> Optional[Expr]:
        """Give up ownership of the tree and return it."""
        expression, self._expression = self._expression, None
        return expression

    def _require_expression(self) -> Expr:
        if self._expression is None:
            raise EmptyExpression("Calculator holds no expression")
        return self._expression

    def is_tautology(self) -> bool:
        """True iff the expression holds under every assignment.

        Raises:
            EmptyExpression: No expression is owned
            InvalidCharacter: The expression uses a letter outside A-Z
        """
        result = checker.is_tautology(self._require_expression())
        get_logger().debug(f"is_tautology({self}) = {result}")
        return result

    def is_contradiction(self) -> bool:
        """True iff the expression fails under every assignment.

        Raises:
            EmptyExpression: No expression is owned
            InvalidCharacter: The expression uses a letter outside A-Z
        """
        result = checker.is_contradiction(self._require_expression())
        get_logger().debug(f"is_contradiction({self}) = {result}")
        return result

    def classify(self) -> Verdict:
        return checker.classify(self._require_expression())

    def counterexample(self, expected: bool = True) -> Optional[Assignment]:
        """First assignment under which the expression is not ``expected``."""
        return checker.find_counterexample(self._require_expression(), expected)

    def truth_table(self) -> Iterator[Tuple[Assignment, bool]]:
        return checker.truth_table(self._require_expression())

    def __str__(self) -> str:
        return "" if self._expression is None else str(self._expression)

    def __repr__(self) -> str:
        return f"ExpressionCalculator({str(self)!r})"
