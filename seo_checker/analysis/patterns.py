"""Tunable text patterns for the GEO rule set.

Kept apart from the scoring code so the phrasing lists can be adjusted
without touching the rules that consume them.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Definitional phrasing: "X is a ...", "Y refers to the ..."
# ---------------------------------------------------------------------------
DEFINITION_VERBS = ["is", "are", "means", "refers to", "defined as"]
DEFINITION_ARTICLES = ["a", "an", "the"]

DEFINITION_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(v).replace(r"\ ", r"\s+") for v in DEFINITION_VERBS) + r")"
    r"\s+(?:" + "|".join(DEFINITION_ARTICLES) + r")\s+\w+",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Exemplar phrasing
# ---------------------------------------------------------------------------
EXAMPLE_PHRASES = ["for example", "for instance", "such as", "like", "e.g."]

EXAMPLE_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(p).replace(r"\ ", r"\s+") for p in EXAMPLE_PHRASES) + r")(?!\w)",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Topic sentences
# ---------------------------------------------------------------------------
SENTENCE_END = re.compile(r"[.!?]")

# Term tokens for keyword density: letters/digits with inner apostrophes or hyphens
TERM_PATTERN = r"[A-Za-z0-9]+(?:['’-][A-Za-z0-9]+)*"

# Schema.org types that earn a structured-data bonus, grouped per bonus
SCHEMA_BONUS_GROUPS: list[frozenset[str]] = [
    frozenset({"FAQPage", "Question"}),
    frozenset({"Article", "BlogPosting"}),
    frozenset({"HowTo"}),
]
