"""
Transliterator Core Engine

Validates Harvard-Kyoto text and converts it to Unicode under one of two
policies:

- lenient: a misplaced diacritic marker is reported as a warning and the
  text is converted anyway; any other validation error is raised.
- strict: every validation error is raised and nothing is converted.
"""

import os
import sys

from .converter import Converter
from .readers import DocxReader, WebReader, read_source
from .schemes import DEFAULT_SCHEME, SCHEMES, Scheme, get_scheme
from .validator import InvalidDiacriticOrder, TextValidator


class Transliterator:
    """
    Main transliterator engine.

    Accepts Harvard-Kyoto text (or a source to read it from) and
    produces Unicode output, optionally saved to a file.
    """

    def __init__(
        self,
        scheme: "str | Scheme" = DEFAULT_SCHEME,
        strict: bool = False,
        output_path: str = None,
    ):
        self.scheme = get_scheme(scheme)
        self.strict = strict
        self.output_path = output_path
        self.validator = TextValidator(self.scheme)
        self.converter = Converter(self.scheme)

    def convert(self, text: str) -> str:
        """
        Validate and convert text.

        Validation stops at the first failing check, so in lenient mode
        a misplaced diacritic also hides any invalid characters after it.

        Args:
            text: Harvard-Kyoto text

        Returns:
            The converted Unicode text

        Raises:
            ValidationError: if validation fails and the mode does not
                allow the failure.
        """
        try:
            self.validator.validate(text)
        except InvalidDiacriticOrder as e:
            if self.strict:
                raise
            print(f"[WARN] {e}", file=sys.stderr)

        return self.converter.convert(text)

    def convert_source(self, source: str) -> str:
        """Read text from a file or URL and convert it."""
        source = source.strip()

        if WebReader.can_handle(source):
            print(f"[URL] Reading: {source}", file=sys.stderr)
        elif DocxReader.can_handle(source):
            print(f"[DOCX] Reading: {source}", file=sys.stderr)
        else:
            print(f"[TXT] Reading: {source}", file=sys.stderr)

        return self.convert(read_source(source))

    def save(self, text: str) -> str:
        """Write converted text to output_path and return the path."""
        if not self.output_path:
            raise ValueError("No output path configured")

        out_dir = os.path.dirname(os.path.abspath(self.output_path))
        os.makedirs(out_dir, exist_ok=True)

        with open(self.output_path, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"[SAVED] {self.output_path}", file=sys.stderr)

        return self.output_path

    @staticmethod
    def supported_schemes() -> dict:
        """Return scheme names and their descriptions."""
        return {name: scheme.description for name, scheme in SCHEMES.items()}


def convert_lenient(text: str, scheme: "str | Scheme" = DEFAULT_SCHEME) -> str:
    """Convert text, tolerating misplaced diacritic markers."""
    return Transliterator(scheme=scheme, strict=False).convert(text)


def convert_strict(text: str, scheme: "str | Scheme" = DEFAULT_SCHEME) -> str:
    """Convert text only if it passes every validation check."""
    return Transliterator(scheme=scheme, strict=True).convert(text)
