"""
Scheme definition shared by the validator and the converter.

A scheme bundles everything that differs between the two target
conventions: the ordered substitution rules, the accepted character
whitelist and the consonants that may not carry a diacritic marker.
"""

from dataclasses import dataclass


# Characters accepted in Harvard-Kyoto input as applied here
STANDARD_CHARS = frozenset(
    "abcdeghijklmnoprstuvz"
    "AGHIJLMNRSU"
    "/\\\n-| '"
)

# Consonants that can never be directly followed by / \ or =
DIACRITIC_CONSONANTS = "bcdghjklmprstvzGHJLMS"

# Markers that belong after a vowel
DIACRITIC_MARKERS = "/\\="


@dataclass(frozen=True)
class Scheme:
    """A target diacritic convention."""
    name: str
    description: str
    rules: tuple[tuple[str, str], ...]  # (pattern, replacement), applied in order
    valid_chars: frozenset = STANDARD_CHARS
    diacritic_consonants: str = DIACRITIC_CONSONANTS
    diacritic_markers: str = DIACRITIC_MARKERS

    def __post_init__(self):
        if not self.rules:
            raise ValueError(f"Scheme {self.name!r} has no substitution rules")
        for pattern, _ in self.rules:
            if not pattern:
                raise ValueError(f"Scheme {self.name!r} has an empty rule pattern")
        _check_rule_order(self.name, self.rules)

    @property
    def patterns(self) -> list[str]:
        return [pattern for pattern, _ in self.rules]


def _check_rule_order(name: str, rules) -> None:
    """Reject tables where a pattern is shadowed by one of its substrings."""
    seen: list[str] = []
    for pattern, _ in rules:
        for earlier in seen:
            if earlier != pattern and earlier in pattern:
                raise ValueError(
                    f"Scheme {name!r}: rule {pattern!r} comes after its substring {earlier!r}"
                )
        seen.append(pattern)
