"""GEO Scorer: four weighted sections over the extracted GEO signals.

Each sub-rule has a nominal maximum and computes what the page ``earned``;
the total score is reduced by ``nominal - earned``:

  A. Structure                 30  (headings 10, paragraphs 10, lists/tables 5, content ratio 5)
  B. Natural-language quality  35  (readability 15, entities 10, questions 5, keyword density 5)
  C. Structured data           25
  D. AI-friendly signals       10  (definitions 3, examples 2, topic sentences 5)

Final score = clamp(100 - total deduction, 0, 100). Issues and
recommendations keep the order in which the rules run.
"""

from __future__ import annotations

import logging
import math

from seo_checker.analysis.geo_signals import MIN_LANGUAGE_BODY_LENGTH
from seo_checker.analysis.patterns import SCHEMA_BONUS_GROUPS, SENTENCE_END
from seo_checker.analysis.types import (
    GeoMetrics,
    GeoReport,
    GeoSignals,
    Issue,
    LanguageSignals,
    Level,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Nominal maxima
# ---------------------------------------------------------------------------
HEADING_MAX = 10
PARAGRAPH_MAX = 10
STRUCTURED_CONTENT_MAX = 5
CONTENT_RATIO_MAX = 5
LANGUAGE_MAX = 35
READABILITY_MAX = 15
ENTITY_MAX = 10
QUESTION_MAX = 5
KEYWORD_MAX = 5
STRUCTURED_DATA_MAX = 25
DEFINITION_MAX = 3
EXAMPLE_MAX = 2
TOPIC_SENTENCE_MAX = 5

# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------
OPTIMAL_PARAGRAPH_WORDS = (40, 150)  # inclusive
CONTENT_RATIO_TARGET = 0.25
READABILITY_IDEAL = (60.0, 80.0)  # inclusive
READABILITY_ACCEPTABLE_MIN = 50.0
READABILITY_FAILURE_PENALTY = 10
ENTITY_DENSITY_TARGET = 5.0  # entities per 500 words
KEYWORD_DENSITY_HIGH = 3.0  # percent
KEYWORD_DENSITY_LOW = 1.0
STRUCTURED_DATA_BASE = 15
SCHEMA_BONUS = 5
TOPIC_SENTENCE_MIN_WORDS = 5
TOPIC_SENTENCE_MIN_PARAGRAPHS = 3  # evaluated only above this count

# Body-length gates for issues that only make sense on longer pages
NO_H2_BODY_LENGTH = 500
NO_LIST_BODY_LENGTH = 1000
NO_QUESTION_BODY_LENGTH = 1000
NO_EXAMPLE_BODY_LENGTH = 800


class _GeoCard:
    """Accumulates section deductions, issues and recommendations."""

    def __init__(self) -> None:
        self.deduction = 0.0
        self.issues: list[Issue] = []
        self.recommendations: list[str] = []

    def earn(self, nominal: float, earned: float) -> float:
        self.deduction += nominal - earned
        return earned

    def flag(self, issue: Issue, recommendation: str | None = None) -> None:
        self.issues.append(issue)
        if recommendation:
            self.recommendations.append(recommendation)

    @property
    def score(self) -> int:
        # Half-up rounding: 92.5 -> 93
        return math.floor(max(0.0, min(100.0, 100.0 - self.deduction)) + 0.5)


# ── A. Structure ─────────────────────────────────────────────────


def _score_headings(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    earned = HEADING_MAX
    if signals.h1_count == 0:
        earned -= 10
        card.flag(
            Issue(
                "No H1 heading",
                "AI systems use the H1 to understand what the page is about.",
                Level.HIGH,
                Level.LOW,
            ),
            "Add a single H1 that states the page topic",
        )
    elif signals.h1_count > 1:
        earned -= 5
        card.flag(
            Issue(
                "Multiple H1 headings",
                f"Found {signals.h1_count} H1 headings; a single H1 gives a clearer topic hierarchy.",
                Level.MEDIUM,
                Level.LOW,
            ),
            "Keep one H1 and demote the others to H2",
        )

    if signals.h2_count == 0 and signals.body_length > NO_H2_BODY_LENGTH:
        earned -= 3
        card.flag(
            Issue(
                "No H2 subheadings",
                "Long content without H2 sections is harder to split into answerable chunks.",
                Level.MEDIUM,
                Level.MEDIUM,
            ),
            "Break the content into sections with descriptive H2 headings",
        )

    metrics.heading_hierarchy_score = card.earn(HEADING_MAX, max(0, earned))


def _score_paragraphs(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    low, high = OPTIMAL_PARAGRAPH_WORDS
    total = len(signals.paragraphs)
    optimal = sum(1 for p in signals.paragraphs if low <= len(p.split()) <= high)

    earned = min(PARAGRAPH_MAX, PARAGRAPH_MAX * optimal / total) if total else 0.0
    if earned < PARAGRAPH_MAX / 2:
        card.flag(
            Issue(
                "Paragraph length is not optimal",
                f"Only {optimal} of {total} paragraphs are {low}-{high} words long.",
                Level.MEDIUM,
                Level.HIGH,
            ),
            f"Rewrite paragraphs to {low}-{high} words, one idea each",
        )

    metrics.total_paragraphs = total
    metrics.optimal_paragraphs = optimal
    metrics.paragraph_score = card.earn(PARAGRAPH_MAX, earned)


def _score_structured_content(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    earned = 0
    if signals.list_count > 0:
        earned += 3
    if signals.table_count > 0:
        earned += 2

    if signals.list_count == 0 and signals.body_length > NO_LIST_BODY_LENGTH:
        card.flag(
            Issue(
                "No lists found",
                "Bulleted or numbered lists are easy for answer engines to quote.",
                Level.LOW,
                Level.MEDIUM,
            ),
            "Summarize steps, features or key points as lists",
        )

    metrics.lists = signals.list_count
    metrics.tables = signals.table_count
    metrics.structured_content_score = card.earn(STRUCTURED_CONTENT_MAX, min(STRUCTURED_CONTENT_MAX, earned))


def _score_content_ratio(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    ratio = signals.body_length / signals.html_length if signals.html_length else 0.0
    earned = CONTENT_RATIO_MAX if ratio > CONTENT_RATIO_TARGET else max(0.0, ratio * 20)

    if ratio < CONTENT_RATIO_TARGET:
        card.flag(
            Issue(
                "Low content-to-code ratio",
                f"Visible text is {ratio:.0%} of the page source; markup and scripts dominate.",
                Level.MEDIUM,
                Level.HIGH,
            ),
            "Reduce inline scripts and markup bloat, or add more substantive text",
        )

    metrics.content_to_code_ratio = ratio
    metrics.content_ratio_score = card.earn(CONTENT_RATIO_MAX, earned)


# ── B. Natural-language quality ──────────────────────────────────


def _score_readability(card: _GeoCard, language: LanguageSignals, metrics: GeoMetrics) -> None:
    readability = language.readability
    if readability is None:
        card.earn(READABILITY_MAX, READABILITY_MAX - READABILITY_FAILURE_PENALTY)
        return

    score = readability.score
    low, high = READABILITY_IDEAL
    if low <= score <= high:
        earned = READABILITY_MAX
    elif READABILITY_ACCEPTABLE_MIN <= score < low:
        earned = 12
        card.flag(
            Issue(
                "Content is slightly difficult to read",
                f"Flesch Reading Ease is {score:.1f}; 60-80 is easiest for AI summaries.",
                Level.MEDIUM,
                Level.MEDIUM,
            ),
            "Shorten sentences and prefer common words",
        )
    elif score > high:
        earned = 12
        card.flag(
            Issue(
                "Content may be too simple",
                f"Flesch Reading Ease is {score:.1f}; very simple text can lack depth.",
                Level.LOW,
                Level.MEDIUM,
            ),
        )
    else:
        earned = 8
        card.flag(
            Issue(
                "Content is difficult to read",
                f"Flesch Reading Ease is {score:.1f} (grade {readability.grade:.1f}).",
                Level.HIGH,
                Level.HIGH,
            ),
            "Simplify the language: split long sentences and explain jargon",
        )

    metrics.readability_score = score
    metrics.grade_level = readability.grade
    card.earn(READABILITY_MAX, earned)


def _score_entities(card: _GeoCard, signals: GeoSignals, language: LanguageSignals, metrics: GeoMetrics) -> None:
    words = signals.word_count
    total = language.entities.total
    density = (total / words) * 500 if words else 0.0

    if density < ENTITY_DENSITY_TARGET:
        card.flag(
            Issue(
                "Low entity density",
                f"About {density:.1f} named people, places or organizations per 500 words.",
                Level.MEDIUM,
                Level.MEDIUM,
            ),
            "Mention specific people, places, brands and organizations",
        )

    metrics.entities = language.entities
    metrics.entity_density = density
    card.earn(ENTITY_MAX, min(ENTITY_MAX, density * 2))


def _score_questions(card: _GeoCard, signals: GeoSignals, language: LanguageSignals, metrics: GeoMetrics) -> None:
    count = language.question_count
    if count == 0 and signals.body_length > NO_QUESTION_BODY_LENGTH:
        card.flag(
            Issue(
                "No questions in content",
                "Question-and-answer phrasing maps directly onto the queries people ask AI assistants.",
                Level.MEDIUM,
                Level.LOW,
            ),
            "Add questions your audience asks, followed by direct answers",
        )

    metrics.questions = count
    card.earn(QUESTION_MAX, QUESTION_MAX if count > 0 else 0)


def _score_keyword_density(card: _GeoCard, language: LanguageSignals, metrics: GeoMetrics) -> None:
    terms = language.terms
    total = len(terms)
    density = (total - len(set(terms))) / total * 100 if total else 0.0

    earned = KEYWORD_MAX
    if density > KEYWORD_DENSITY_HIGH:
        earned = 2
        card.flag(
            Issue(
                "Possible keyword over-optimization",
                f"{density:.1f}% of terms are repeats.",
                Level.MEDIUM,
                Level.MEDIUM,
            ),
            "Vary wording and use synonyms instead of repeating the same terms",
        )
    elif density < KEYWORD_DENSITY_LOW:
        earned = 3
        card.flag(
            Issue(
                "Low keyword repetition",
                f"Only {density:.1f}% of terms repeat; the main topic may not be reinforced.",
                Level.LOW,
                Level.LOW,
            ),
        )

    metrics.keyword_density = density
    card.earn(KEYWORD_MAX, earned)


def _score_language(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    language = signals.language
    if signals.body_length <= MIN_LANGUAGE_BODY_LENGTH or language is None:
        card.earn(LANGUAGE_MAX, 0)
        card.flag(
            Issue(
                "Insufficient content",
                f"The page has only {signals.body_length} characters of text to analyze.",
                Level.HIGH,
                Level.HIGH,
            ),
            "Add substantial, well-structured text content",
        )
        return

    _score_readability(card, language, metrics)
    _score_entities(card, signals, language, metrics)
    _score_questions(card, signals, language, metrics)
    _score_keyword_density(card, language, metrics)


# ── C. Structured data ───────────────────────────────────────────


def _score_structured_data(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    info = signals.structured_data
    metrics.structured_data = info

    if not info.has_json_ld:
        card.earn(STRUCTURED_DATA_MAX, 0)
        card.flag(
            Issue(
                "No structured data",
                "No JSON-LD schema markup was found on the page.",
                Level.HIGH,
                Level.MEDIUM,
            ),
            "Add JSON-LD schema markup (Article, FAQPage or HowTo)",
        )
        return

    earned = STRUCTURED_DATA_BASE
    for schema_type in info.schemas:
        for group in SCHEMA_BONUS_GROUPS:
            if schema_type in group:
                earned += SCHEMA_BONUS

    card.earn(STRUCTURED_DATA_MAX, min(STRUCTURED_DATA_MAX, earned))


# ── D. AI-friendly signals ───────────────────────────────────────


def _score_definitions(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    count = signals.definition_count
    if count == 0:
        card.flag(
            Issue(
                "No clear definitions",
                "No definitional phrasing such as \"X is a ...\" was found.",
                Level.MEDIUM,
                Level.LOW,
            ),
            "Define key terms explicitly (e.g. \"X is a ...\")",
        )

    metrics.definitions = count
    card.earn(DEFINITION_MAX, min(DEFINITION_MAX, count * 0.5))


def _score_examples(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    count = signals.example_count
    if count == 0 and signals.body_length > NO_EXAMPLE_BODY_LENGTH:
        card.flag(
            Issue(
                "No examples",
                "The content never says \"for example\", \"such as\" or similar.",
                Level.LOW,
                Level.LOW,
            ),
            "Illustrate key points with concrete examples",
        )

    metrics.examples = count
    card.earn(EXAMPLE_MAX, min(EXAMPLE_MAX, count * 0.5))


def _first_sentence(paragraph: str) -> str:
    return SENTENCE_END.split(paragraph, maxsplit=1)[0].strip()


def _score_topic_sentences(card: _GeoCard, signals: GeoSignals, metrics: GeoMetrics) -> None:
    paragraphs = signals.paragraphs
    earned = TOPIC_SENTENCE_MAX

    if len(paragraphs) > TOPIC_SENTENCE_MIN_PARAGRAPHS:
        weak = sum(1 for p in paragraphs if len(_first_sentence(p).split()) < TOPIC_SENTENCE_MIN_WORDS)
        if weak / len(paragraphs) > 0.5:
            earned = 2
            card.flag(
                Issue(
                    "Weak topic sentences",
                    f"{weak} of {len(paragraphs)} paragraphs open with a sentence under "
                    f"{TOPIC_SENTENCE_MIN_WORDS} words.",
                    Level.MEDIUM,
                    Level.MEDIUM,
                ),
                "Open each paragraph with a sentence that states its main point",
            )

    metrics.topic_sentence_score = card.earn(TOPIC_SENTENCE_MAX, earned)


# ── Orchestration ────────────────────────────────────────────────


def score_geo(signals: GeoSignals) -> GeoReport:
    card = _GeoCard()
    metrics = GeoMetrics()

    # A. Structure
    _score_headings(card, signals, metrics)
    _score_paragraphs(card, signals, metrics)
    _score_structured_content(card, signals, metrics)
    _score_content_ratio(card, signals, metrics)

    # B. Natural-language quality
    _score_language(card, signals, metrics)

    # C. Structured data
    _score_structured_data(card, signals, metrics)

    # D. AI-friendly signals
    _score_definitions(card, signals, metrics)
    _score_examples(card, signals, metrics)
    _score_topic_sentences(card, signals, metrics)

    score = card.score
    logger.debug("GEO score=%d deduction=%.2f issues=%d", score, card.deduction, len(card.issues))

    return GeoReport(
        score=score,
        metrics=metrics,
        issues=card.issues,
        recommendations=card.recommendations,
    )
