# utils/expression_reader.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Reader for files holding one propositional expression per line

from pathlib import Path
from typing import Iterator, List, Tuple
from utils.logger import get_logger


class ExpressionFileError(Exception):
    """Exception raised when an expression file cannot be read."""

    pass


def read_expressions(filepath: str) -> Iterator[Tuple[int, str]]:
    """Read expressions from a text file.

    Each non-blank line holds one fully-parenthesized expression. Lines
    whose first non-blank character is ``#`` are comments.

    Expected format:
        # classic laws
        (Av(!A))
        ((A>B)=((!B)>(!A)))

    Args:
        filepath: Path to the expression file

    Yields:
        (line_number, expression) pairs in file order, 1-based

    Raises:
        ExpressionFileError: If the file is missing or cannot be decoded
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise ExpressionFileError(f"Expression file not found: {filepath}")

    logger.debug(f"Reading expression file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            for line_number, line in enumerate(file, start=1):
                text = line.strip()
                if not text or text.startswith("#"):
                    continue
                logger.debug(f"Read expression from line {line_number}: {text}")
                yield line_number, text

    except (OSError, UnicodeDecodeError) as e:
        raise ExpressionFileError(f"Error reading expression file: {e}")


def load_expressions(filepath: str) -> List[Tuple[int, str]]:
    """Read the whole file eagerly, failing before any expression is checked.

    Raises:
        ExpressionFileError: If the file is missing, unreadable or has no expressions
    """
    expressions = list(read_expressions(filepath))
    if not expressions:
        raise ExpressionFileError(f"No expressions found in {filepath}")
    return expressions
