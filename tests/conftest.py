"""
Pytest configuration and fixtures for check-keyword tests.
"""

import logging

import pytest

from check_keyword.core.classifier import KeywordClassifier
from check_keyword.logging_config import LOGGER_NAME
from check_keyword.rust.keywords import Edition


@pytest.fixture
def classifier_2015():
    """Classifier for the 2015 edition."""
    return KeywordClassifier(Edition.E2015)


@pytest.fixture
def classifier_2018():
    """Classifier for the 2018 edition."""
    return KeywordClassifier(Edition.E2018)


@pytest.fixture
def schema_field_names():
    """Field names as they might come out of an external schema."""
    return ["id", "type", "self", "name", "async", "union", "dyn", "try"]


@pytest.fixture
def names_file(tmp_path):
    """Create a names file with comments and blank lines."""
    content = """# fields of the Order message
id
type

  self  
# trailing comment
match
"""
    path = tmp_path / "names.txt"
    path.write_text(content)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo handlers and propagation changes made by setup_logging."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
