"""
Validation of Harvard-Kyoto input text.

Checks run in a fixed order and stop at the first failure:

1. ASCII only
2. diacritic markers placed after vowels, never after consonants
3. every character belongs to the scheme's whitelist
"""

import re
from enum import Enum

from .schemes import Scheme, get_scheme, DEFAULT_SCHEME


class ValidationErrorKind(Enum):
    """Kinds of validation failure."""
    NOT_ASCII = "not_ascii"
    INVALID_CHARS = "invalid_chars"
    INVALID_DIACRITIC_ORDER = "invalid_diacritic_order"


class ValidationError(Exception):
    """Raised when text is not valid Harvard-Kyoto input."""
    kind: ValidationErrorKind
    label = "Invalid text"

    def __init__(self, items):
        self.items = list(items)
        super().__init__(self.items)

    def __str__(self) -> str:
        return f"{self.label} {self.items!r}"

    def __eq__(self, other):
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.kind is other.kind and self.items == other.items

    def __hash__(self):
        return hash((self.kind, tuple(self.items)))


class NotASCII(ValidationError):
    """Text contains characters outside the ASCII range."""
    kind = ValidationErrorKind.NOT_ASCII
    label = "Non ASCII chars"

    @property
    def chars(self) -> list[str]:
        return self.items


class InvalidChars(ValidationError):
    """Text contains ASCII characters the scheme does not accept."""
    kind = ValidationErrorKind.INVALID_CHARS
    label = "Invalid characters"

    @property
    def chars(self) -> list[str]:
        return self.items


class InvalidDiacriticOrder(ValidationError):
    """A diacritic marker directly follows a consonant."""
    kind = ValidationErrorKind.INVALID_DIACRITIC_ORDER
    label = "Invalid diacritic order:"

    @property
    def sequences(self) -> list[str]:
        return self.items


def _distinct(chars) -> list[str]:
    """Deduplicate, keeping first-occurrence order."""
    return list(dict.fromkeys(chars))


class TextValidator:
    """
    Validates text against one scheme's character rules.

    Stateless apart from the compiled pattern, so a single instance can
    be shared freely.
    """

    def __init__(self, scheme: "str | Scheme" = DEFAULT_SCHEME):
        self.scheme = get_scheme(scheme)
        self._misplaced = re.compile(
            f"[{re.escape(self.scheme.diacritic_consonants)}]"
            f"[{re.escape(self.scheme.diacritic_markers)}]"
        )

    def check_ascii(self, text: str) -> None:
        """
        Raise NotASCII if any character is outside the ASCII range.

        Raises:
            NotASCII: with the distinct offending characters.
        """
        if text.isascii():
            return
        raise NotASCII(_distinct(c for c in text if not c.isascii()))

    def diacritics_ordered(self, text: str) -> None:
        """
        Raise InvalidDiacriticOrder if a consonant carries a marker.

        Every match is reported in scan order, duplicates included.
        """
        sequences = self._misplaced.findall(text)
        if sequences:
            raise InvalidDiacriticOrder(sequences)

    def standard_characters(self, text: str) -> None:
        """Raise InvalidChars for characters outside the whitelist."""
        valid = self.scheme.valid_chars
        invalid = _distinct(c for c in text if c not in valid)
        if invalid:
            raise InvalidChars(invalid)

    def validate(self, text: str) -> None:
        """
        Run all checks in order.

        Args:
            text: Harvard-Kyoto text.

        Raises:
            ValidationError: the first failing check's error.
        """
        self.check_ascii(text)
        self.diacritics_ordered(text)
        self.standard_characters(text)

    def is_valid(self, text: str) -> bool:
        try:
            self.validate(text)
        except ValidationError:
            return False
        return True


_VALIDATORS: dict[str, TextValidator] = {}


def get_validator(scheme: "str | Scheme" = DEFAULT_SCHEME) -> TextValidator:
    """Return a shared validator for a scheme."""
    scheme = get_scheme(scheme)
    if scheme.name not in _VALIDATORS or _VALIDATORS[scheme.name].scheme is not scheme:
        _VALIDATORS[scheme.name] = TextValidator(scheme)
    return _VALIDATORS[scheme.name]


def validate(text: str, scheme: "str | Scheme" = DEFAULT_SCHEME) -> None:
    """Validate text, raising the first ValidationError found."""
    get_validator(scheme).validate(text)
