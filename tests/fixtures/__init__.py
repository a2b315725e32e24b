# Test fixtures
from .sample_texts import (
    nfkc,
    VALID_CLASSICAL_TEXT,
    VALID_MULTILINE_TEXT,
    EXPECTED_MULTILINE_IAST,
    MISPLACED_ACCENT_TEXT,
    RIGVEDA_1_1_1,
    EXPECTED_RIGVEDA_1_1_1,
    RIGVEDA_1_1_1_FIRST_HALF,
    EXPECTED_RIGVEDA_1_1_1_FIRST_HALF,
)

__all__ = [
    "nfkc",
    "VALID_CLASSICAL_TEXT",
    "VALID_MULTILINE_TEXT",
    "EXPECTED_MULTILINE_IAST",
    "MISPLACED_ACCENT_TEXT",
    "RIGVEDA_1_1_1",
    "EXPECTED_RIGVEDA_1_1_1",
    "RIGVEDA_1_1_1_FIRST_HALF",
    "EXPECTED_RIGVEDA_1_1_1_FIRST_HALF",
]
