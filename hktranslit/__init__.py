"""
hktranslit - Harvard-Kyoto to Unicode Transliterator

Validates ASCII Harvard-Kyoto transliteration of Sanskrit and converts it
into Unicode text with composed diacritics, in either the classical
(IAST style) or the Vedic convention.
"""

__version__ = "1.0.0"

from .schemes import SCHEMES, DEFAULT_SCHEME, Scheme, get_scheme
from .validator import (
    ValidationError,
    ValidationErrorKind,
    NotASCII,
    InvalidChars,
    InvalidDiacriticOrder,
    TextValidator,
    validate,
)
from .converter import Converter, convert
from .core import Transliterator, convert_lenient, convert_strict

__all__ = [
    "SCHEMES",
    "DEFAULT_SCHEME",
    "Scheme",
    "get_scheme",
    "ValidationError",
    "ValidationErrorKind",
    "NotASCII",
    "InvalidChars",
    "InvalidDiacriticOrder",
    "TextValidator",
    "validate",
    "Converter",
    "convert",
    "Transliterator",
    "convert_lenient",
    "convert_strict",
]
