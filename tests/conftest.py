import pytest

from sch.interpreter import Interpreter
from sch.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with natives loaded."""
    return Environment.new_root()


@pytest.fixture
def interp():
    return Interpreter()
