"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from hktranslit.converter import Converter
from hktranslit.core import Transliterator
from hktranslit.validator import TextValidator
from tests.fixtures import VALID_MULTILINE_TEXT


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "network: mark as requiring network access")


# ============================================================================
# Validator / Converter Fixtures
# ============================================================================


@pytest.fixture
def iast_validator():
    """Create a validator for the classical scheme."""
    return TextValidator("iast")


@pytest.fixture
def vedic_validator():
    """Create a validator for the Vedic scheme."""
    return TextValidator("vedic")


@pytest.fixture
def iast_converter():
    """Create a converter for the classical scheme."""
    return Converter("iast")


@pytest.fixture
def vedic_converter():
    """Create a converter for the Vedic scheme."""
    return Converter("vedic")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def lenient_engine():
    """Create a transliterator that tolerates misplaced diacritics."""
    return Transliterator(scheme="iast", strict=False)


@pytest.fixture
def strict_engine():
    """Create a transliterator that rejects any defect."""
    return Transliterator(scheme="iast", strict=True)


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def temp_text_file(tmp_path):
    """Create a temporary Harvard-Kyoto text file."""
    file_path = tmp_path / "sample.txt"
    file_path.write_text(VALID_MULTILINE_TEXT, encoding="utf-8")
    return file_path
