# tests/conftest.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Verum tests.

This module ensures the project root is importable and provides shared
expression tables used across the parser, checker and CLI test modules.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import expression
        import logic
        import model
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def tautologies():
    """Expressions true under every assignment."""
    return [
        "(Av!A)",
        "(A>A)",
        "(A=A)",
        "((A^B)>A)",
        "((A>B)=((!B)>(!A)))",
        "(((A>B)^(B>C))>(A>C))",
        "((!(A^B))=((!A)v(!B)))",
    ]


@pytest.fixture
def contradictions():
    """Expressions false under every assignment."""
    return [
        "(A^!A)",
        "(A+A)",
        "((A^B)^(!A))",
        "(!(Av!A))",
        "((A=B)^(A+B))",
    ]


@pytest.fixture
def contingent():
    """Expressions true under some assignments and false under others."""
    return [
        "A",
        "(!A)",
        "(A^B)",
        "(AvB)",
        "(A>B)",
        "(A+B)",
        "((A^B)vC)",
    ]
