"""
Vedic scheme.

Vocalic r and l take a ring below so they can still carry a pitch
accent, L is the intervocalic retroflex lateral, and MM marks the
candrabindu.
"""

from .base import Scheme
from .iast import ACUTE, GRAVE, MACRON, DANDA, DOUBLE_DANDA


RING_BELOW = "\u0325"
CANDRABINDU = "\u0310"


VEDIC_RULES = (
    ("/", ACUTE),
    ("\\", GRAVE),
    ("A", "a" + MACRON),
    ("I", "i" + MACRON),
    ("U", "u" + MACRON),
    ("lRR", "l" + RING_BELOW + MACRON),
    ("lR", "l" + RING_BELOW),
    ("RR", "r" + RING_BELOW + MACRON),
    ("R", "r" + RING_BELOW),
    ("L", "ḷ"),
    ("MM", "m" + CANDRABINDU),
    ("M", "ṁ"),
    ("H", "ḥ"),
    ("G", "ṅ"),
    ("J", "ñ"),
    ("T", "ṭ"),
    ("D", "ḍ"),
    ("N", "ṇ"),
    ("z", "ś"),
    ("S", "ṣ"),
    ("||", DOUBLE_DANDA),
    ("|", DANDA),
)


VEDIC = Scheme(
    name="vedic",
    description="Vedic with pitch accents (r̥, l̥, ḷ, ṁ, m̐)",
    rules=VEDIC_RULES,
)
