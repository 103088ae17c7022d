# expression/ast_nodes.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Expression tree node classes for propositional formulas

"""Expression tree nodes for parsed propositional formulas.

This module defines immutable and hashable node classes used to build tree
representations of fully-parenthesized propositional formulas over the
variable letters A-Z. Every node records, at construction time, the set of
variable letters occurring beneath it; that set drives assignment
enumeration in the checker.

Node Types:
    Variable: A single variable letter
    Unary: Negation of one child expression
    Binary: AND, OR, IMPLIES, IFF or XOR over two child expressions

All nodes support the visitor design pattern for traversal and rendering.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Protocol, Tuple

from model.assignment import Assignment, LETTERS


class Operator(Enum):
    """Logical connectives, valued by their source symbol."""

    AND = "^"
    OR = "v"
    IMPLIES = ">"
    IFF = "="
    XOR = "+"
    NOT = "!"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_unary(self) -> bool:
        return self is Operator.NOT

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """Look up the connective written as ``symbol``.

        Raises:
            ValueError: ``symbol`` is not a connective
        """
        return cls(symbol)


class Visitor(Protocol):
    """Interface for tree visitors implementing the visitor design pattern.

    Concrete visitors must implement a visit method for each node type.
    """

    def visit_variable(self, n: Variable): ...

    def visit_unary(self, n: Unary): ...

    def visit_binary(self, n: Binary): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression tree nodes.

    Concrete nodes set ``variables`` and ``variables_count`` once in
    ``__post_init__``; both always describe the subtree rooted at the node.
    """

    def accept(self, v: Visitor):
        """Dispatch to the visit_* method matching the concrete node type."""
        raise NotImplementedError

    def evaluate(self, assignment: Assignment) -> bool:
        """Truth value of this subtree under ``assignment``.

        Raises:
            InvalidCharacter: A variable letter outside A-Z was reached
        """
        raise NotImplementedError

    def clone(self) -> Expr:
        """Return a deep, fully independent copy of this subtree."""
        raise NotImplementedError

    def variables_mask(self) -> Tuple[bool, ...]:
        """Occurrence set as 26 booleans indexed A=0 ... Z=25."""
        return tuple(letter in self.variables for letter in LETTERS)

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Reference to a single variable letter.

    Attributes:
        name: The variable letter
    """

    name: str
    variables: FrozenSet[str] = field(init=False, repr=False, compare=False)
    variables_count: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "variables", frozenset((self.name,)))
        object.__setattr__(self, "variables_count", 1)

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def evaluate(self, assignment: Assignment) -> bool:
        return assignment.get(self.name)

    def clone(self) -> Variable:
        return Variable(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Unary(Expr):
    """Unary connective applied to one child expression.

    Only NOT is meaningful; any other operator evaluates to False.

    Attributes:
        operator: The connective
        operand: The child expression
    """

    operator: Operator
    operand: Expr
    variables: FrozenSet[str] = field(init=False, repr=False, compare=False)
    variables_count: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "variables", self.operand.variables)
        object.__setattr__(self, "variables_count", self.operand.variables_count)

    def accept(self, v: Visitor):
        return v.visit_unary(self)

    def evaluate(self, assignment: Assignment) -> bool:
        if self.operator is not Operator.NOT:
            return False
        return not self.operand.evaluate(assignment)

    def clone(self) -> Unary:
        return Unary(self.operator, self.operand.clone())

    def __str__(self) -> str:
        return f"({self.operator.symbol}{self.operand})"


@dataclass(frozen=True, slots=True)
class Binary(Expr):
    """Binary connective applied to two child expressions.

    The occurrence count is the size of the union of both children's
    occurrence sets, so shared letters are counted once.

    Attributes:
        operator: The connective
        left: Left operand
        right: Right operand
    """

    operator: Operator
    left: Expr
    right: Expr
    variables: FrozenSet[str] = field(init=False, repr=False, compare=False)
    variables_count: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        union = self.left.variables | self.right.variables
        object.__setattr__(self, "variables", union)
        object.__setattr__(self, "variables_count", len(union))

    def accept(self, v: Visitor):
        return v.visit_binary(self)

    def evaluate(self, assignment: Assignment) -> bool:
        op = self.operator
        if op is Operator.OR:
            return self.left.evaluate(assignment) or self.right.evaluate(assignment)
        if op is Operator.AND:
            return self.left.evaluate(assignment) and self.right.evaluate(assignment)
        if op is Operator.IMPLIES:
            return not self.left.evaluate(assignment) or self.right.evaluate(assignment)
        if op is Operator.IFF:
            return self.left.evaluate(assignment) == self.right.evaluate(assignment)
        if op is Operator.XOR:
            return self.left.evaluate(assignment) != self.right.evaluate(assignment)
        return False

    def clone(self) -> Binary:
        return Binary(self.operator, self.left.clone(), self.right.clone())

    def __str__(self) -> str:
        return f"({self.left}{self.operator.symbol}{self.right})"
