# utils/tree_visualizer.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Graphviz rendering of parsed expression trees

import os
from typing import Optional

from graphviz import Digraph

from expression.ast_nodes import Binary, Expr, Unary, Variable, Visitor
from utils.logger import get_logger

logger = get_logger()

VISUALIZATION_OUTPUT_FOLDER = "tree_visualizations"


class _GraphBuilder(Visitor):
    """
    Visitor adding one graph node per tree node and an edge from each
    connective to its operands, left before right. Returns the node id.
    """

    def __init__(self, dot: Digraph):
        self.dot = dot
        self._counter = 0

    def _next_id(self) -> str:
        node_id = f"n{self._counter}"
        self._counter += 1
        return node_id

    def visit_variable(self, n: Variable) -> str:
        node_id = self._next_id()
        self.dot.node(node_id, n.name, shape="ellipse", style="filled", fillcolor="lightskyblue")
        return node_id

    def visit_unary(self, n: Unary) -> str:
        node_id = self._next_id()
        self.dot.node(node_id, n.operator.symbol, shape="box", style="filled", fillcolor="lightpink")
        self.dot.edge(node_id, n.operand.accept(self))
        return node_id

    def visit_binary(self, n: Binary) -> str:
        node_id = self._next_id()
        self.dot.node(node_id, n.operator.symbol, shape="box", style="filled", fillcolor="lightgoldenrodyellow")
        self.dot.edge(node_id, n.left.accept(self), label="L")
        self.dot.edge(node_id, n.right.accept(self), label="R")
        return node_id


def build_expression_graph(expr: Expr, fmt: str = "png") -> Digraph:
    """
    Build a Graphviz digraph of ``expr`` without rendering it.
    Variables are ellipses, connectives are boxes labelled with their symbol.
    """
    dot = Digraph(comment=f"Expression tree for {expr}", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.4")
    expr.accept(_GraphBuilder(dot))
    return dot


def visualize_expression_tree(
    expr: Expr,
    base_filename: str,
    output_dir: str = VISUALIZATION_OUTPUT_FOLDER,
    fmt: str = "png",
) -> Optional[str]:
    """
    Render ``expr`` into ``output_dir``. Requires the Graphviz ``dot`` binary.

    Args:
        expr: The expression tree to draw.
        base_filename: The base name for the output file.
        output_dir: Folder for rendered images, created on demand.
        fmt: The output format for the image (e.g., "png", "svg").

    Returns:
        Path of the rendered file, or None if rendering failed.
    """
    try:
        os.makedirs(output_dir, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create directory {output_dir}: {e}. Skipping tree rendering.")
        return None

    output_path = os.path.join(output_dir, base_filename)
    dot = build_expression_graph(expr, fmt)

    try:
        rendered = dot.render(output_path, view=False, cleanup=True)
    except Exception as e:
        logger.warning(f"Failed to render expression tree to {output_path}.{fmt}: {e}")
        return None

    logger.info(f"Expression tree saved to {rendered}")
    return rendered
