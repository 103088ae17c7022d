# tests/logic_tests/test_checker_scenarios.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Test suite for exhaustive tautology/contradiction checking

"""Checker – enumeration size, ordering, verdicts and short-circuiting."""

import pytest
from expression import parse
from expression.ast_nodes import Binary, Operator, Variable
from logic import checker
from logic.verdict import Verdict
from model.assignment import Assignment, InvalidCharacter


class CountingVariable(Variable):
    """Variable that records how often it is evaluated."""

    __slots__ = ()
    calls = []

    def evaluate(self, assignment):
        CountingVariable.calls.append(assignment)
        return super().evaluate(assignment)


@pytest.mark.parametrize(
    "text, expected_count",
    [
        ("A", 2),
        ("(A^B)", 4),
        ("((A^B)v(A>C))", 8),
        ("((A+A)^(A=A))", 2),
        ("(((A^B)^(C^D))v((E+F)>(G=H)))", 256),
    ],
)
def test_enumerates_two_to_the_distinct_letters(text, expected_count):
    expr = parse(text)
    assignments = list(checker.iter_assignments(expr))

    assert len(assignments) == expected_count == 2 ** expr.variables_count
    assert len({tuple(a.letters()) for a in assignments}) == expected_count


def test_enumeration_order_is_canonical():
    expr = parse("(A^C)")
    rows = [a.letters() for a in checker.iter_assignments(expr)]
    assert rows == [[], ["A"], ["C"], ["A", "C"]]


def test_truth_table_rows():
    expr = parse("(A>B)")
    table = [(a.format("AB"), value) for a, value in checker.truth_table(expr)]
    assert table == [
        ("A=0 B=0", True),
        ("A=1 B=0", False),
        ("A=0 B=1", True),
        ("A=1 B=1", True),
    ]


def test_tautologies(tautologies):
    for text in tautologies:
        expr = parse(text)
        assert checker.is_tautology(expr), text
        assert not checker.is_contradiction(expr), text
        assert checker.classify(expr) is Verdict.TAUTOLOGY, text


def test_contradictions(contradictions):
    for text in contradictions:
        expr = parse(text)
        assert checker.is_contradiction(expr), text
        assert not checker.is_tautology(expr), text
        assert checker.classify(expr) is Verdict.CONTRADICTION, text


def test_contingent_expressions(contingent):
    for text in contingent:
        expr = parse(text)
        assert not checker.is_tautology(expr), text
        assert not checker.is_contradiction(expr), text
        assert checker.classify(expr) is Verdict.CONTINGENT, text


def test_find_counterexample_returns_first_offender():
    expr = parse("(A>B)")
    assert checker.find_counterexample(expr, True) == Assignment({"A": True})
    assert checker.find_counterexample(expr, False) == Assignment()


def test_find_counterexample_none_for_tautology():
    assert checker.find_counterexample(parse("(Av!A)"), True) is None


def test_check_stops_at_first_counterexample():
    CountingVariable.calls.clear()
    expr = Binary(Operator.AND, CountingVariable("A"), Variable("B"))

    assert not checker.is_tautology(expr)
    # Assignment #0 (all false) already falsifies A^B
    assert len(CountingVariable.calls) == 1


def test_classify_stops_once_both_values_seen():
    CountingVariable.calls.clear()
    expr = Binary(Operator.OR, CountingVariable("A"), Variable("B"))

    assert checker.classify(expr) is Verdict.CONTINGENT
    assert len(CountingVariable.calls) == 2


def test_invalid_character_propagates():
    with pytest.raises(InvalidCharacter):
        checker.is_tautology(parse("(a^A)"))
