# expression/exceptions.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Custom exceptions for expression parsing

"""Domain-specific exceptions for propositional expression parsing.

This module defines exceptions that can be raised while turning a
fully-parenthesized expression string into an expression tree. All
exceptions inherit from ParseError so callers can catch the whole
family with a single handler.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails.

    Used throughout the parsing pipeline to provide consistent error
    handling for callers of ``expression.parse``.
    """

    pass


class MalformedExpression(ParseError):
    """Exception raised when non-empty input does not follow the grammar.

    Covers missing outer parentheses, unbalanced parentheses, a missing
    top-level operator and operators with an empty operand.

    Attributes:
        position: Source index the problem was detected at, if known
    """

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position
