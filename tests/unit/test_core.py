"""
Unit tests for the transliterator engine.
"""

import pytest

from hktranslit.core import Transliterator, convert_lenient, convert_strict
from hktranslit.validator import InvalidChars, InvalidDiacriticOrder, NotASCII
from tests.fixtures import (
    nfkc,
    MISPLACED_ACCENT_TEXT,
    VALID_MULTILINE_TEXT,
    EXPECTED_MULTILINE_IAST,
)


class TestLenientMode:
    """Tests for lenient conversion."""

    def test_valid_text(self, lenient_engine):
        """Test that valid text converts."""
        assert lenient_engine.convert("asti nRpo") == "asti nṛpo"

    def test_misplaced_accent_still_converts(self, lenient_engine):
        """Test that a diacritic order defect does not block output."""
        assert lenient_engine.convert(MISPLACED_ACCENT_TEXT) == nfkc("ag\u0301ni")

    def test_misplaced_accent_warns(self, lenient_engine, capsys):
        """Test that the tolerated defect is reported on stderr."""
        lenient_engine.convert(MISPLACED_ACCENT_TEXT)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[WARN] Invalid diacritic order: ['g/']" in captured.err

    def test_invalid_chars_raise(self, lenient_engine):
        """Test that other errors are still surfaced."""
        with pytest.raises(InvalidChars):
            lenient_engine.convert("af=")

    def test_non_ascii_raises(self, lenient_engine):
        """Test that non-ASCII input is surfaced."""
        with pytest.raises(NotASCII):
            lenient_engine.convert("ñ")

    def test_misplaced_accent_checked_before_charset(self, lenient_engine, capsys):
        """Test that a misplaced accent ends validation, so later invalid chars still convert."""
        assert lenient_engine.convert("ab= xyz f") == "ab= xyś f"
        assert "[WARN] Invalid diacritic order: ['b=']" in capsys.readouterr().err

    def test_helper(self):
        """Test the module-level helper."""
        assert convert_lenient(MISPLACED_ACCENT_TEXT) == nfkc("ag\u0301ni")
        assert convert_lenient("ILe", scheme="vedic") == nfkc("īḷe")


class TestStrictMode:
    """Tests for strict conversion."""

    def test_valid_text(self, strict_engine):
        """Test that valid text converts."""
        assert strict_engine.convert(VALID_MULTILINE_TEXT) == EXPECTED_MULTILINE_IAST

    def test_misplaced_accent_raises(self, strict_engine):
        """Test that strict mode surfaces diacritic order defects."""
        with pytest.raises(InvalidDiacriticOrder) as exc_info:
            strict_engine.convert(MISPLACED_ACCENT_TEXT)
        assert exc_info.value.sequences == ["g/"]

    def test_invalid_chars_raise(self, strict_engine):
        """Test that invalid characters are surfaced."""
        with pytest.raises(InvalidChars):
            strict_engine.convert("af=")

    def test_helper(self):
        """Test the module-level helper."""
        assert convert_strict("a/sti") == "ásti"
        with pytest.raises(InvalidDiacriticOrder):
            convert_strict("ab=")


class TestSources:
    """Tests for reading and saving."""

    def test_convert_source(self, lenient_engine, temp_text_file, capsys):
        """Test converting a text file."""
        assert lenient_engine.convert_source(str(temp_text_file)) == EXPECTED_MULTILINE_IAST
        assert "[TXT] Reading:" in capsys.readouterr().err

    def test_convert_source_missing(self, lenient_engine, tmp_path):
        """Test that a missing file raises."""
        with pytest.raises(FileNotFoundError):
            lenient_engine.convert_source(str(tmp_path / "missing.txt"))

    def test_save(self, tmp_path, capsys):
        """Test that output is written as UTF-8, creating directories."""
        out = tmp_path / "out" / "result.txt"
        engine = Transliterator(output_path=str(out))

        assert engine.save("asti nṛpo") == str(out)
        assert out.read_text(encoding="utf-8") == "asti nṛpo"
        assert "[SAVED]" in capsys.readouterr().err

    def test_save_without_path(self, lenient_engine):
        """Test that save needs an output path."""
        with pytest.raises(ValueError):
            lenient_engine.save("x")


class TestEngineConfiguration:
    """Tests for engine setup."""

    def test_defaults(self):
        """Test default settings."""
        engine = Transliterator()
        assert engine.scheme.name == "iast"
        assert engine.strict is False
        assert engine.output_path is None

    def test_unknown_scheme(self):
        """Test that an unknown scheme is rejected."""
        with pytest.raises(ValueError):
            Transliterator(scheme="itrans")

    def test_supported_schemes(self):
        """Test the scheme listing."""
        schemes = Transliterator.supported_schemes()
        assert set(schemes) == {"iast", "vedic"}
        assert all(isinstance(d, str) and d for d in schemes.values())
