# utils/__init__.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Utility module exports

from .expression_reader import (
    read_expressions,
    load_expressions,
    ExpressionFileError,
)

__all__ = [
    "read_expressions",
    "load_expressions",
    "ExpressionFileError",
]
