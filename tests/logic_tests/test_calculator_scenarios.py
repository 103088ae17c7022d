# tests/logic_tests/test_calculator_scenarios.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Test suite for the expression calculator handle

"""ExpressionCalculator – queries, ownership transfer and empty handling."""

import copy

import pytest
from expression import ParseError
from logic import EmptyExpression, ExpressionCalculator, Verdict
from logic.checker import iter_assignments
from model.assignment import InvalidCharacter


class TestCalculatorQueries:
    """Tautology and contradiction queries through the calculator."""

    @pytest.mark.parametrize(
        "text, tautology, contradiction",
        [
            ("(A^!A)", False, True),
            ("(Av!A)", True, False),
            ("(A>A)", True, False),
            ("(A=A)", True, False),
            ("(A+A)", False, True),
            ("(A^B)", False, False),
        ],
    )
    def test_known_verdicts(self, text, tautology, contradiction):
        calculator = ExpressionCalculator(text)

        assert calculator.is_tautology() is tautology
        assert calculator.is_contradiction() is contradiction

    @pytest.mark.parametrize("letter", [chr(c) for c in range(ord("A"), ord("Z") + 1)])
    def test_single_letter_is_contingent(self, letter):
        calculator = ExpressionCalculator(letter)

        assert not calculator.is_tautology()
        assert not calculator.is_contradiction()
        assert calculator.classify() is Verdict.CONTINGENT

    def test_counterexample(self):
        calculator = ExpressionCalculator("((A^B)>C)")
        witness = calculator.counterexample()

        assert witness.letters() == ["A", "B"]
        assert calculator.counterexample(expected=False).letters() == []

    def test_truth_table_length(self):
        rows = list(ExpressionCalculator("((A^B)vC)").truth_table())
        assert len(rows) == 8
        assert sum(value for _, value in rows) == 5

    def test_invalid_character_reaches_caller(self):
        with pytest.raises(InvalidCharacter):
            ExpressionCalculator("a").is_tautology()

    def test_malformed_input_raises_on_construction(self):
        with pytest.raises(ParseError):
            ExpressionCalculator("(A^B")


class TestCalculatorEmpty:
    """Queries on a calculator that owns no expression."""

    def test_empty_string_holds_nothing(self):
        calculator = ExpressionCalculator("")

        assert calculator.is_empty
        assert calculator.expression is None
        assert str(calculator) == ""

    @pytest.mark.parametrize(
        "query",
        [
            lambda c: c.is_tautology(),
            lambda c: c.is_contradiction(),
            lambda c: c.classify(),
            lambda c: c.counterexample(),
            lambda c: c.truth_table(),
        ],
    )
    def test_queries_raise_empty_expression(self, query):
        with pytest.raises(EmptyExpression):
            query(ExpressionCalculator())


class TestCalculatorOwnership:
    """Copy and move semantics of the owned tree."""

    def test_copy_clones_tree(self):
        original = ExpressionCalculator("((A>B)=((!B)>(!A)))")
        clone = original.copy()

        assert clone.expression == original.expression
        assert clone.expression is not original.expression
        assert clone.is_tautology() and original.is_tautology()

    def test_copy_module_protocols(self):
        original = ExpressionCalculator("(A+B)")

        for clone in (copy.copy(original), copy.deepcopy(original)):
            assert clone.expression == original.expression
            assert clone.expression is not original.expression

    def test_clone_evaluates_identically(self):
        original = ExpressionCalculator("(((A^B)vC)>(A=C))")
        clone = original.copy()

        for assignment in iter_assignments(original.expression):
            assert clone.expression.evaluate(assignment) == original.expression.evaluate(assignment)

    def test_copy_of_empty_is_empty(self):
        assert ExpressionCalculator().copy().is_empty

    def test_assign_replaces_tree(self):
        target = ExpressionCalculator("(A^!A)")
        source = ExpressionCalculator("(Av!A)")

        target.assign(source)

        assert target.is_tautology()
        assert target.expression == source.expression
        assert target.expression is not source.expression
        assert not source.is_empty

    def test_assign_from_empty_empties_target(self):
        target = ExpressionCalculator("A")
        target.assign(ExpressionCalculator())
        assert target.is_empty

    def test_self_assign_keeps_tree(self):
        calculator = ExpressionCalculator("(A>B)")
        tree = calculator.expression

        calculator.assign(calculator)
        calculator.take(calculator)

        assert calculator.expression is tree

    def test_take_moves_and_empties_source(self):
        source = ExpressionCalculator("(A=A)")
        tree = source.expression
        target = ExpressionCalculator("B")

        target.take(source)

        assert target.expression is tree
        assert source.is_empty
        with pytest.raises(EmptyExpression):
            source.is_tautology()

    def test_moved_from_constructor(self):
        source = ExpressionCalculator("(A+A)")
        target = ExpressionCalculator.moved_from(source)

        assert target.is_contradiction()
        assert source.is_empty

    def test_release_returns_tree(self):
        calculator = ExpressionCalculator("(!A)")
        tree = calculator.release()

        assert str(tree) == "(!A)"
        assert calculator.is_empty
