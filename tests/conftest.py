# tests/conftest.py
"""
Shared fixtures for the SIMPLE engine tests.
"""

import pytest

from simple_lang import Env, Number, Boolean
from simple_lang.runtime import reducer, evaluator, compiler


@pytest.fixture(autouse=True)
def quiet_engines():
    """Keep engine debug output off unless a test turns it on."""
    flags = (reducer.DEBUG_REDUCE, evaluator.DEBUG_EVAL, compiler.DEBUG_COMPILE)
    reducer.DEBUG_REDUCE = evaluator.DEBUG_EVAL = compiler.DEBUG_COMPILE = False
    yield
    reducer.DEBUG_REDUCE, evaluator.DEBUG_EVAL, compiler.DEBUG_COMPILE = flags


@pytest.fixture
def empty_env():
    return Env()


@pytest.fixture
def xy_env():
    return Env({"x": Number(2), "y": Number(5)})


@pytest.fixture
def flag_env():
    return Env({"x": Boolean(True)})
