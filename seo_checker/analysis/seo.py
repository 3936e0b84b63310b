"""SEO Extractor & Scorer.

Flat, single-pass extraction of classic on-page signals followed by a
fixed penalty table. The score starts at 100; every violated rule
subtracts its penalty and appends one issue and one recommendation.
Within a field only the first matching tier fires (missing → short → long).
"""

from __future__ import annotations

import logging

from seo_checker.analysis.document import ParsedDocument
from seo_checker.analysis.types import Issue, Level, SeoReport, SeoSignals

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Length bands and penalties
# ---------------------------------------------------------------------------
TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160

PENALTY_TITLE_MISSING = 15
PENALTY_TITLE_SHORT = 10
PENALTY_TITLE_LONG = 5
PENALTY_DESCRIPTION_MISSING = 15
PENALTY_DESCRIPTION_SHORT = 10
PENALTY_DESCRIPTION_LONG = 5
PENALTY_OPEN_GRAPH = 10
PENALTY_NO_H1 = 10
PENALTY_MULTIPLE_H1 = 5
PENALTY_MISSING_ALT = 10


def extract_seo_signals(doc: ParsedDocument) -> SeoSignals:
    """Pull title, meta description, Open Graph, heading and image counts."""
    return SeoSignals(
        title=doc.title_text(),
        description=doc.meta_content("name", "description"),
        og_title=doc.meta_content("property", "og:title"),
        og_description=doc.meta_content("property", "og:description"),
        h1_count=doc.count("h1"),
        h2_count=doc.count("h2"),
        total_images=doc.count("img"),
        images_without_alt=doc.count("img:not([alt])"),
    )


class _Scorecard:
    """Running total plus the issues/recommendations emitted so far."""

    def __init__(self) -> None:
        self.score = 100
        self.issues: list[Issue] = []
        self.recommendations: list[str] = []

    def penalize(self, penalty: int, issue: Issue, recommendation: str) -> None:
        self.score -= penalty
        self.issues.append(issue)
        self.recommendations.append(recommendation)


def _check_title(card: _Scorecard, title: str) -> None:
    length = len(title)
    if not title:
        card.penalize(
            PENALTY_TITLE_MISSING,
            Issue(
                "Missing title tag",
                "The page has no <title>, so search engines have to invent one for the results page.",
                Level.HIGH,
                Level.LOW,
            ),
            "Add a descriptive title tag",
        )
    elif length < TITLE_MIN_LENGTH:
        card.penalize(
            PENALTY_TITLE_SHORT,
            Issue(
                "Title is too short",
                f"The title is {length} characters; 50-60 characters makes better use of the results snippet.",
                Level.MEDIUM,
                Level.LOW,
            ),
            "Expand your title to 50-60 characters for better visibility",
        )
    elif length > TITLE_MAX_LENGTH:
        card.penalize(
            PENALTY_TITLE_LONG,
            Issue(
                "Title is too long",
                f"The title is {length} characters and may be truncated in search results.",
                Level.LOW,
                Level.LOW,
            ),
            "Shorten title to 50-60 characters",
        )


def _check_description(card: _Scorecard, description: str) -> None:
    length = len(description)
    if not description:
        card.penalize(
            PENALTY_DESCRIPTION_MISSING,
            Issue(
                "Missing meta description",
                "Without a meta description search engines pick an arbitrary text fragment for the snippet.",
                Level.HIGH,
                Level.LOW,
            ),
            "Add a compelling meta description (150-160 characters)",
        )
    elif length < DESCRIPTION_MIN_LENGTH:
        card.penalize(
            PENALTY_DESCRIPTION_SHORT,
            Issue(
                "Meta description is too short",
                f"The meta description is {length} characters; aim for 150-160.",
                Level.MEDIUM,
                Level.LOW,
            ),
            "Expand description to 150-160 characters",
        )
    elif length > DESCRIPTION_MAX_LENGTH:
        card.penalize(
            PENALTY_DESCRIPTION_LONG,
            Issue(
                "Meta description is too long",
                f"The meta description is {length} characters and will be cut off in search results.",
                Level.LOW,
                Level.LOW,
            ),
            "Shorten description to 150-160 characters",
        )


def score_seo(signals: SeoSignals) -> SeoReport:
    """Apply the penalty table to extracted signals."""
    card = _Scorecard()

    _check_title(card, signals.title)
    _check_description(card, signals.description)

    if not signals.og_title or not signals.og_description:
        card.penalize(
            PENALTY_OPEN_GRAPH,
            Issue(
                "Missing Open Graph tags",
                "og:title and og:description are needed for rich previews when the page is shared.",
                Level.MEDIUM,
                Level.LOW,
            ),
            "Add Open Graph meta tags for better social media previews",
        )

    if signals.h1_count == 0:
        card.penalize(
            PENALTY_NO_H1,
            Issue(
                "No H1 heading found",
                "The page has no main heading describing its topic.",
                Level.HIGH,
                Level.LOW,
            ),
            "Add exactly one H1 heading with your main keyword",
        )
    elif signals.h1_count > 1:
        card.penalize(
            PENALTY_MULTIPLE_H1,
            Issue(
                f"Multiple H1 headings found ({signals.h1_count})",
                f"The page has {signals.h1_count} H1 headings, which dilutes the main topic.",
                Level.MEDIUM,
                Level.LOW,
            ),
            "Use only one H1 heading per page",
        )

    if signals.images_without_alt > 0:
        card.penalize(
            PENALTY_MISSING_ALT,
            Issue(
                f"{signals.images_without_alt} images missing alt text",
                f"{signals.images_without_alt} of {signals.total_images} images have no alt attribute.",
                Level.MEDIUM,
                Level.MEDIUM,
            ),
            "Add descriptive alt text to all images for accessibility and SEO",
        )

    score = max(0, card.score)
    logger.debug("SEO score=%d issues=%d", score, len(card.issues))

    return SeoReport(
        score=score,
        signals=signals,
        issues=card.issues,
        recommendations=card.recommendations,
    )


def analyze_seo(doc: ParsedDocument) -> SeoReport:
    return score_seo(extract_seo_signals(doc))
