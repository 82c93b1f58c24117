"""Pytest configuration and fixtures for pyscope tests."""

import pytest
import structlog

from pyscope.analysis.line_index import index_lines


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration bound to a test's captured streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_python_code() -> str:
    """Clean, documented Python code."""
    return '''def add(a, b):
    """Add two numbers."""
    return a + b


def divide(a, b):
    """Divide two numbers."""
    return a / b


print(add(1, 2))
'''


@pytest.fixture
def vulnerable_code() -> str:
    """Sample code with security problems."""
    return """import os

def execute_command(user_input):
    os.system(user_input)

result = eval(user_input)
"""


@pytest.fixture
def complex_code() -> str:
    """Sample code with deep nesting and many decision points."""
    return """def complex_function(x, y, z):
    if x > 0:
        if y > 0:
            if z > 0:
                return x + y + z
            elif z < 0:
                return x + y - z
            else:
                return x + y
        elif y < 0:
            if z > 0 and x > 1:
                return x - y + z
            else:
                return x - y - z
    elif x < 0:
        if y > 0 or z > 0:
            return -x + y
        else:
            return -x - y
    return 0
"""


@pytest.fixture
def index():
    """Shortcut for building a line index from a source string."""
    return index_lines
