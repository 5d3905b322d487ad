"""Pytest configuration for tests.

bizgraph itself is imported from the installed package. The shared graph
builders live in builders.py beside the tests and are imported as a plain
module, which relies on pytest's default `prepend` import mode putting
tests/ on sys.path (tests/ has no __init__.py).
"""

import pytest

from builders import ModelBuilder, build_context, build_logger


@pytest.fixture
def builder():
    return ModelBuilder()


@pytest.fixture
def context():
    return build_context()


@pytest.fixture
def logger():
    return build_logger()
