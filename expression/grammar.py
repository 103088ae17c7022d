# expression/grammar.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Recursive split parser for fully-parenthesized propositional expressions

"""Recursive split parser for fully-parenthesized propositional expressions.

The grammar needs no precedence rules: every connective application carries
its own pair of parentheses. A range of tokens is parsed as follows:

- one token: a Variable named by that character
- leading ``!``: negation of the rest of the range
- otherwise: the range must be wrapped in ``(`` ... ``)``; the interior is
  scanned left to right tracking nesting depth, and the first operator found
  at depth 0 splits it. ``!`` makes a Unary over everything after it; any
  other operator makes a Binary over the text before and after it.

Recursion works on ``(start, end)`` index ranges into one immutable token
list, so no substrings are built while descending.
"""

from typing import Any, List, Optional

from .ast_nodes import Binary, Expr, Operator, Unary, Variable
from .exceptions import MalformedExpression
from .lexer import OPERATOR_TOKENS, tokenize
from utils.logger import get_logger


class _ExpressionParser:
    """Recursive split parser over single-character tokens.

    Attributes:
        _tokens: Token list of the text currently being parsed
    """

    def __init__(self):
        self._tokens: List[Any] = []

    def parse(self, text: str) -> Optional[Expr]:
        """Parse expression text into an expression tree.

        Args:
            text: Fully-parenthesized expression string

        Returns:
            Root node of the tree, or None for empty (or blank) input

        Raises:
            MalformedExpression: Non-empty input does not follow the grammar
        """
        logger = get_logger()
        self._tokens = tokenize(text)

        if not self._tokens:
            logger.debug("Empty input, no expression built")
            return None

        result = self._parse_range(0, len(self._tokens))
        logger.debug(f"Parsed {text!r} into {type(result).__name__}")
        return result

    def _position(self, i: int) -> int:
        """Source index of token ``i``, or one past the last token."""
        if i < len(self._tokens):
            return self._tokens[i].index
        return self._tokens[-1].index + 1

    def _parse_range(self, start: int, end: int) -> Expr:
        tokens = self._tokens

        if start >= end:
            raise MalformedExpression("Missing operand", self._position(start))

        if end - start == 1:
            return Variable(tokens[start].value)

        if tokens[start].type == "NOT":
            return Unary(Operator.NOT, self._parse_range(start + 1, end))

        if tokens[start].type != "LPAREN" or tokens[end - 1].type != "RPAREN":
            raise MalformedExpression(
                "Expected an expression wrapped in parentheses", self._position(start)
            )

        inner_start, inner_end = start + 1, end - 1
        depth = 0
        for i in range(inner_start, inner_end):
            token = tokens[i]
            if token.type == "LPAREN":
                depth += 1
            elif token.type == "RPAREN":
                depth -= 1
                if depth < 0:
                    raise MalformedExpression("Unbalanced ')'", token.index)
            elif depth == 0 and token.type in OPERATOR_TOKENS:
                operator = Operator.from_symbol(token.value)
                if operator.is_unary:
                    return Unary(operator, self._parse_range(i + 1, inner_end))
                return Binary(
                    operator,
                    self._parse_range(inner_start, i),
                    self._parse_range(i + 1, inner_end),
                )

        if depth != 0:
            raise MalformedExpression("Unbalanced '('", self._position(start))

        raise MalformedExpression("No top-level operator", self._position(start))
