"""Core types and DTOs for the Page Analysis Engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Level(str, Enum):
    """Impact / effort bucket of an issue."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IssueSource(str, Enum):
    """Which rule set produced an issue."""

    SEO = "seo"
    GEO = "geo"


class Quadrant(str, Enum):
    """Priority matrix quadrant."""

    QUICK_WIN = "quick-win"  # High impact, low effort
    STRATEGIC = "strategic"  # High impact, high effort
    NICE_TO_HAVE = "nice-to-have"  # Low impact, low effort
    AVOID = "avoid"  # Low impact, high effort


# ---------------------------------------------------------------------------
# Fetch / issue containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FetchedDocument:
    """Raw page as returned by the fetcher. Lives for one request only."""

    url: str
    html: str
    status_code: int = 200


@dataclass(frozen=True)
class Issue:
    title: str
    description: str
    impact: Level = Level.MEDIUM
    effort: Level = Level.MEDIUM

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "impact": self.impact.value,
            "effort": self.effort.value,
        }


# ---------------------------------------------------------------------------
# SEO
# ---------------------------------------------------------------------------


@dataclass
class SeoSignals:
    """Raw on-page signals pulled from the document."""

    title: str = ""
    description: str = ""
    og_title: str = ""
    og_description: str = ""
    h1_count: int = 0
    h2_count: int = 0
    total_images: int = 0
    images_without_alt: int = 0


@dataclass
class SeoReport:
    score: int = 100
    signals: SeoSignals = field(default_factory=SeoSignals)
    issues: list[Issue] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    @property
    def title_length(self) -> int:
        return len(self.signals.title)

    @property
    def description_length(self) -> int:
        return len(self.signals.description)


# ---------------------------------------------------------------------------
# NLP capability outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Readability:
    """Flesch Reading Ease score and Flesch-Kincaid grade level."""

    score: float
    grade: float


@dataclass(frozen=True)
class EntityCounts:
    people: int = 0
    places: int = 0
    organizations: int = 0

    @property
    def total(self) -> int:
        return self.people + self.places + self.organizations


# ---------------------------------------------------------------------------
# GEO
# ---------------------------------------------------------------------------


@dataclass
class StructuredDataInfo:
    """JSON-LD blocks found on the page."""

    script_count: int = 0
    schemas: list[str] = field(default_factory=list)  # declared @type values, "Unknown" if missing

    @property
    def has_json_ld(self) -> bool:
        return self.script_count > 0


@dataclass
class LanguageSignals:
    """NLP results over the body text. Only computed for non-trivial bodies."""

    readability: Readability | None = None  # None = formula failed on this text
    entities: EntityCounts = field(default_factory=EntityCounts)
    question_count: int = 0
    terms: list[str] = field(default_factory=list)


@dataclass
class GeoSignals:
    """Everything the GEO scorer needs, extracted from one document."""

    body_text: str = ""
    html_length: int = 0
    h1_count: int = 0
    h2_count: int = 0
    paragraphs: list[str] = field(default_factory=list)
    list_count: int = 0
    table_count: int = 0
    structured_data: StructuredDataInfo = field(default_factory=StructuredDataInfo)
    definition_count: int = 0
    example_count: int = 0
    language: LanguageSignals | None = None

    @property
    def body_length(self) -> int:
        return len(self.body_text)

    @property
    def word_count(self) -> int:
        return len(self.body_text.split())


@dataclass
class GeoMetrics:
    heading_hierarchy_score: float = 0.0
    total_paragraphs: int = 0
    optimal_paragraphs: int = 0
    paragraph_score: float = 0.0
    lists: int = 0
    tables: int = 0
    structured_content_score: float = 0.0
    content_to_code_ratio: float = 0.0
    content_ratio_score: float = 0.0
    readability_score: float | None = None
    grade_level: float | None = None
    entities: EntityCounts | None = None
    entity_density: float | None = None
    questions: int | None = None
    keyword_density: float | None = None
    structured_data: StructuredDataInfo = field(default_factory=StructuredDataInfo)
    definitions: int = 0
    examples: int = 0
    topic_sentence_score: float = 0.0

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict (snake_case keys)."""
        return {
            "heading_hierarchy_score": self.heading_hierarchy_score,
            "total_paragraphs": self.total_paragraphs,
            "optimal_paragraphs": self.optimal_paragraphs,
            "paragraph_score": round(self.paragraph_score, 2),
            "lists": self.lists,
            "tables": self.tables,
            "structured_content_score": self.structured_content_score,
            "content_to_code_ratio": round(self.content_to_code_ratio, 4),
            "content_ratio_score": round(self.content_ratio_score, 2),
            "readability_score": None if self.readability_score is None else round(self.readability_score, 1),
            "grade_level": None if self.grade_level is None else round(self.grade_level, 1),
            "entities": None
            if self.entities is None
            else {
                "people": self.entities.people,
                "places": self.entities.places,
                "organizations": self.entities.organizations,
                "total": self.entities.total,
            },
            "entity_density": None if self.entity_density is None else round(self.entity_density, 2),
            "questions": self.questions,
            "keyword_density": None if self.keyword_density is None else round(self.keyword_density, 2),
            "structured_data": {
                "has_json_ld": self.structured_data.has_json_ld,
                "script_count": self.structured_data.script_count,
                "schemas": list(self.structured_data.schemas),
            },
            "definitions": self.definitions,
            "examples": self.examples,
            "topic_sentence_score": self.topic_sentence_score,
        }


@dataclass
class GeoReport:
    score: int = 100
    metrics: GeoMetrics = field(default_factory=GeoMetrics)
    issues: list[Issue] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
