from .base import Scheme, STANDARD_CHARS, DIACRITIC_CONSONANTS, DIACRITIC_MARKERS
from .iast import IAST
from .vedic import VEDIC

SCHEMES = {
    IAST.name: IAST,
    VEDIC.name: VEDIC,
}

DEFAULT_SCHEME = IAST.name


def get_scheme(scheme: "str | Scheme" = DEFAULT_SCHEME) -> Scheme:
    """Resolve a scheme name (or pass a Scheme through)."""
    if isinstance(scheme, Scheme):
        return scheme
    try:
        return SCHEMES[scheme.lower()]
    except (KeyError, AttributeError):
        raise ValueError(
            f"Unknown scheme: {scheme!r}. Available: {', '.join(sorted(SCHEMES))}"
        ) from None


__all__ = [
    "Scheme",
    "STANDARD_CHARS",
    "DIACRITIC_CONSONANTS",
    "DIACRITIC_MARKERS",
    "IAST",
    "VEDIC",
    "SCHEMES",
    "DEFAULT_SCHEME",
    "get_scheme",
]
