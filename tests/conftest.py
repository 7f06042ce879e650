import pytest

from tss.interpreter import Interpreter
from tss.types.environment import Environment


@pytest.fixture
def output():
    """Lines emitted by `write` and by the driver, in program order."""
    return []


@pytest.fixture
def env(output):
    """Fresh environment whose output sink records lines."""
    return Environment(output.append)


@pytest.fixture
def interp(output):
    """Fresh interpreter whose output sink records lines."""
    return Interpreter(output.append)
