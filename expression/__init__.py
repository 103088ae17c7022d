# expression/__init__.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Expression parsing components for fully-parenthesized propositional formulas

"""Propositional expression parsing into evaluable expression trees.

This module converts fully-parenthesized formula strings over the variable
letters A-Z into immutable expression trees. Each tree node knows which
variables occur beneath it and can evaluate itself under a truth
assignment, which is all the tautology checker needs.

Core Functions:
    parse: Converts expression strings into expression trees

Supported Connectives:
    ^  AND        v  OR        >  IMPLIES
    =  IFF        +  XOR       !  NOT (prefix)

Grammar Features:
    - Every connective application is wrapped in its own parentheses
    - No precedence rules: the first top-level operator splits a group
    - Whitespace between tokens is ignored
    - Malformed input raises MalformedExpression with the source position

Example:
    >>> from expression import parse
    >>> tree = parse("((A>B)^A)")
    >>> sorted(tree.variables)
    ['A', 'B']
"""

from typing import Optional

from .ast_nodes import Binary, Expr, Operator, Unary, Variable
from .exceptions import MalformedExpression, ParseError
from .grammar import _ExpressionParser
from utils.logger import get_logger


def parse(source: str) -> Optional[Expr]:
    """Parse an expression string into an expression tree.

    Uses a fresh parser instance for each invocation so parsing stays
    stateless between calls.

    Args:
        source: Fully-parenthesized expression string

    Returns:
        Root node of the parsed tree, or None if ``source`` is empty

    Raises:
        MalformedExpression: Non-empty input does not follow the grammar
        ParseError: Any other failure while parsing

    Example:
        >>> parse("(Av(!A))")
        Binary(operator=<Operator.OR: 'v'>, left=Variable(name='A'), ...)
    """
    logger = get_logger()
    logger.debug(f"Parsing expression: {source}")

    parser = _ExpressionParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during expression parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "Expr",
    "Variable",
    "Unary",
    "Binary",
    "Operator",
    "ParseError",
    "MalformedExpression",
]
