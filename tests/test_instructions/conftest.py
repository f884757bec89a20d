"""Shared fixtures for instruction tests."""

import pytest

from top7.instructions import get_all_instructions

# Import instructions to register them
from top7.instructions import new_round  # noqa: F401
from top7.instructions import standings  # noqa: F401
from top7.instructions import vote  # noqa: F401
from top7.instructions import blank  # noqa: F401


@pytest.fixture
def instructions():
    return get_all_instructions()
