# expression/lexer.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Lexical analyzer for propositional expression tokenization using SLY

"""Lexical analyzer for propositional expression strings.

This module breaks input strings into single-character tokens for the
recursive split parser. Every token covers exactly one source character,
so the parser can work on token index ranges without re-slicing text.

Supported Tokens:
- Variables: A-Z
- Operators: ^ (AND), v (OR), > (IMPLIES), = (IFF), + (XOR), ! (NOT)
- Grouping: ( and )
- Any other non-whitespace character: OTHER (left to evaluation to reject)
- Whitespace: ignored during tokenization
"""

from typing import Any, List

from sly import Lexer
from utils.logger import get_logger


class ExpressionLexer(Lexer):
    """SLY-based lexer for propositional expression tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "XOR",
        "NOT",
        "LPAREN",
        "RPAREN",
        "OTHER",
    }

    ignore = " \t\r\n"

    VAR = r"[A-Z]"
    AND = r"\^"
    OR = r"v"
    IMPLIES = r">"
    IFF = r"="
    XOR = r"\+"
    NOT = r"!"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Must stay last: catches every remaining non-whitespace character
    OTHER = r"\S"


OPERATOR_TOKENS = frozenset({"AND", "OR", "IMPLIES", "IFF", "XOR", "NOT"})


def tokenize(text: str) -> List[Any]:
    """Tokenize ``text`` into a list of single-character tokens."""
    logger = get_logger()
    result = list(ExpressionLexer().tokenize(text))
    logger.debug(f"Tokenized {text!r} into {len(result)} tokens")
    return result
