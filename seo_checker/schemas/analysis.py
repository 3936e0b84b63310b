"""Pydantic request/response models for page analysis.

Field names are snake_case in Python and serialized with camelCase aliases
(``titleLength``, ``geoMetrics`` ...), which is what the UI consumes.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LevelName = Literal["high", "medium", "low"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Request ──────────────────────────────────────────────────────


class AnalyzeRequest(CamelModel):
    url: str | None = Field(default=None, description="Absolute http(s) URL of the page to analyze")


# ── Shared ───────────────────────────────────────────────────────


class IssueOut(CamelModel):
    title: str
    description: str
    impact: LevelName
    effort: LevelName


# ── GEO metrics ──────────────────────────────────────────────────


class EntitiesOut(CamelModel):
    people: int = Field(ge=0)
    places: int = Field(ge=0)
    organizations: int = Field(ge=0)
    total: int = Field(ge=0)


class StructuredDataOut(CamelModel):
    has_json_ld: bool = False
    script_count: int = Field(default=0, ge=0)
    schemas: list[str] = Field(default_factory=list, description="Declared JSON-LD @type values")


class GeoMetricsOut(CamelModel):
    heading_hierarchy_score: float = Field(ge=0, le=10)
    total_paragraphs: int = Field(ge=0)
    optimal_paragraphs: int = Field(ge=0)
    paragraph_score: float = Field(ge=0, le=10)
    lists: int = Field(ge=0)
    tables: int = Field(ge=0)
    structured_content_score: float = Field(ge=0, le=5)
    content_to_code_ratio: float = Field(ge=0, description="Visible text length / raw HTML length")
    content_ratio_score: float = Field(ge=0, le=5)
    readability_score: float | None = Field(default=None, description="Flesch Reading Ease")
    grade_level: float | None = Field(default=None, description="Flesch-Kincaid grade level")
    entities: EntitiesOut | None = None
    entity_density: float | None = Field(default=None, description="Entities per 500 words")
    questions: int | None = None
    keyword_density: float | None = Field(default=None, description="Repeated terms, percent")
    structured_data: StructuredDataOut = Field(default_factory=StructuredDataOut)
    definitions: int = Field(ge=0)
    examples: int = Field(ge=0)
    topic_sentence_score: float = Field(ge=0, le=5)


# ── Top-level response ──────────────────────────────────────────


class AnalysisResult(CamelModel):
    # SEO
    score: int = Field(ge=0, le=100)
    title: str = ""
    title_length: int = Field(ge=0)
    description: str = ""
    description_length: int = Field(ge=0)
    og_title: str = ""
    og_description: str = ""
    h1_count: int = Field(ge=0)
    h2_count: int = Field(ge=0)
    images_without_alt: int = Field(ge=0)
    total_images: int = Field(ge=0)
    issues: list[IssueOut] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    # GEO
    geo_score: int = Field(ge=0, le=100)
    geo_issues: list[IssueOut] = Field(default_factory=list)
    geo_recommendations: list[str] = Field(default_factory=list)
    geo_metrics: GeoMetricsOut


class ErrorResponse(BaseModel):
    error: str
