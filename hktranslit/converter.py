"""
Harvard-Kyoto to Unicode converter.

Conversion is two steps: the scheme's substitution rules are applied in
order over the whole text, then the result is NFKC-normalized so base
letters and combining marks collapse into precomposed characters where
Unicode defines one.

The converter never fails. Text that did not pass validation still
converts, just not into anything meaningful.
"""

import unicodedata

from .schemes import Scheme, get_scheme, DEFAULT_SCHEME


NORMALIZATION_FORM = "NFKC"


class Converter:
    """Applies one scheme's substitution rules."""

    def __init__(self, scheme: "str | Scheme" = DEFAULT_SCHEME):
        self.scheme = get_scheme(scheme)

    def ascii_to_unicode(self, text: str) -> str:
        # Each rule sees the output of the previous one
        for pattern, replacement in self.scheme.rules:
            text = text.replace(pattern, replacement)
        return text

    @staticmethod
    def normalize_unicode(text: str) -> str:
        return unicodedata.normalize(NORMALIZATION_FORM, text)

    def convert(self, text: str) -> str:
        """
        Convert Harvard-Kyoto text to normalized Unicode.

        Args:
            text: ASCII Harvard-Kyoto text.

        Returns:
            The NFKC-normalized Unicode text.
        """
        return self.normalize_unicode(self.ascii_to_unicode(text))


def convert(text: str, scheme: "str | Scheme" = DEFAULT_SCHEME) -> str:
    """Convert text with the given scheme."""
    return Converter(scheme).convert(text)
