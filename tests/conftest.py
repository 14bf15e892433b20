import pytest

from lithia.interpreter import Lisp
from lithia.types.environment import Environment


@pytest.fixture
def lisp():
    """Return an interpreter with the default environments for each test."""
    return Lisp()


@pytest.fixture
def env(lisp):
    return lisp.env


@pytest.fixture
def bare_env():
    """An environment with no builtins registered."""
    return Environment()
