import logging

import pytest

from catt.lexer import scan
from catt.validator import validate


def _messages(source):
    return [d.message for d in validate(scan(source))]


@pytest.fixture
def messages():
    """Diagnostic messages for a source string, in emission order."""
    return _messages


@pytest.fixture
def restore_root_logging():
    # configure_logging replaces the root handlers; put pytest's back afterwards.
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
