"""
Classical Sanskrit scheme (IAST style diacritics).
"""

from .base import Scheme


ACUTE = "\u0301"
GRAVE = "\u0300"
MACRON = "\u0304"
DANDA = "\u0964"
DOUBLE_DANDA = "\u0965"


IAST_RULES = (
    ("/", ACUTE),
    ("\\", GRAVE),
    ("A", "a" + MACRON),
    ("I", "i" + MACRON),
    ("U", "u" + MACRON),
    ("lRR", "ḷ" + MACRON),  # ḹ
    ("lR", "ḷ"),
    ("RR", "ṛ" + MACRON),   # ṝ
    ("R", "ṛ"),
    ("M", "ṃ"),
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


IAST = Scheme(
    name="iast",
    description="Classical Sanskrit with IAST diacritics (ṛ, ṃ, ḷ)",
    rules=IAST_RULES,
)
