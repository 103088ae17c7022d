#!/usr/bin/env python3
# run_calculator.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Command-line interface for tautology/contradiction checking with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional, Tuple

from expression.exceptions import ParseError
from logic import EmptyExpression, ExpressionCalculator, Verdict
from model.assignment import InvalidCharacter
from utils.expression_reader import ExpressionFileError, load_expressions
from utils.logger import LogLevel, get_logger
from utils.tree_visualizer import visualize_expression_tree


def configure_logging_for_calculator(debug: bool = False, quiet: bool = False) -> None:
    """Configure logging levels for the calculator.

    Args:
        debug: Enable DEBUG level logging
        quiet: Only show warnings and errors (ignored when debug is set)
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    elif quiet:
        logger.set_level(LogLevel.WARNING)
    else:
        logger.set_level(LogLevel.INFO)


def collect_expressions(args: argparse.Namespace) -> List[Tuple[str, str]]:
    """Gather ``(source, text)`` pairs from the command line and the file.

    Raises:
        ExpressionFileError: The expression file is missing or empty
    """
    collected = [(f"arg {i}", text) for i, text in enumerate(args.expressions, start=1)]

    if args.file:
        for line_number, text in load_expressions(str(args.file)):
            collected.append((f"{args.file.name}:{line_number}", text))

    return collected


def check_expression(
    text: str,
    source: str,
    show_table: bool,
    show_counterexample: bool,
    render_dir: Optional[Path],
    fmt: str,
) -> Verdict:
    """Parse, classify and report one expression.

    Raises:
        ParseError: The expression is malformed
        EmptyExpression: The expression is blank
        InvalidCharacter: The expression uses a letter outside A-Z
    """
    logger = get_logger()

    calculator = ExpressionCalculator(text)
    if calculator.is_empty:
        raise EmptyExpression(f"Empty expression ({source})")

    expr = calculator.expression
    logger.expression_loaded(str(calculator), ", ".join(sorted(expr.variables)), source)

    verdict = calculator.classify()
    logger.verdict_reached(text, verdict.name)

    if show_counterexample and verdict is Verdict.CONTINGENT:
        for expected in (True, False):
            witness = calculator.counterexample(expected)
            logger.counterexample_found(expected, witness.format(expr.variables))

    if show_table:
        for assignment, value in calculator.truth_table():
            logger.truth_table_row(assignment.format(expr.variables), value)

    if render_dir is not None:
        safe_name = source.replace(" ", "_").replace(":", "_")
        visualize_expression_tree(expr, f"expr_{safe_name}", str(render_dir), fmt)

    return verdict


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Verum propositional tautology and contradiction checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_calculator.py "(Av(!A))"
  python run_calculator.py "((A>B)^A)" --table
  python run_calculator.py -f laws.txt --counterexample
  python run_calculator.py "((A^B)>A)" --render trees --format svg

Grammar:
  Variables are the letters A-Z; every connective application is wrapped
  in parentheses. Connectives:
    ^ AND   v OR   > IMPLIES   = IFF   + XOR   ! NOT (prefix)
        """,
    )

    parser.add_argument(
        "expressions", nargs="*", help="Fully-parenthesized expressions to check"
    )

    parser.add_argument(
        "-f", "--file", type=Path, help="File with one expression per line"
    )

    parser.add_argument(
        "--table", action="store_true", help="Print the truth table of each expression"
    )

    parser.add_argument(
        "--counterexample",
        action="store_true",
        help="For contingent expressions, print a falsifying and a satisfying assignment",
    )

    parser.add_argument(
        "--render", type=Path, metavar="DIR", help="Render each expression tree with Graphviz into DIR"
    )

    parser.add_argument(
        "--format", default="png", choices=["png", "svg", "pdf"], help="Image format for --render"
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report errors; use the exit code"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --quiet)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the calculator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_calculator(debug=args.debug, quiet=args.quiet)
    logger = get_logger()

    try:
        expressions = collect_expressions(args)
        if not expressions:
            parser.error("no expressions given (pass them as arguments or with --file)")

        verdicts = []
        for source, text in expressions:
            verdicts.append(
                check_expression(
                    text,
                    source,
                    show_table=args.table,
                    show_counterexample=args.counterexample,
                    render_dir=args.render,
                    fmt=args.format,
                )
            )

        summary = ", ".join(
            f"{sum(1 for v in verdicts if v is kind)} {kind.name.lower()}" for kind in Verdict
        )
        logger.info(f"\nChecked {len(verdicts)} expression(s): {summary}")
        return 0

    except ExpressionFileError as e:
        logger.error(f"Expression file error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Expression parsing error: {e}")
        return 2

    except (InvalidCharacter, EmptyExpression) as e:
        logger.error(f"Evaluation error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Checking interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
