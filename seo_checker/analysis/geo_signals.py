"""GEO Extractor: structural, structured-data and language signals.

Pure with respect to I/O: works on an already parsed document and an
injected ``TextAnalyzer``. NLP failures are logged and degrade to empty
results so that one failing capability never aborts the analysis.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import TypeVar

from seo_checker.analysis.document import ParsedDocument
from seo_checker.analysis.nlp import TextAnalyzer
from seo_checker.analysis.patterns import DEFINITION_PATTERN, EXAMPLE_PATTERN
from seo_checker.analysis.types import (
    EntityCounts,
    GeoSignals,
    LanguageSignals,
    StructuredDataInfo,
)
from seo_checker.core.exceptions import ReadabilityError, StructuredDataError

logger = logging.getLogger(__name__)

# Below this body length the natural-language section is not evaluated
MIN_LANGUAGE_BODY_LENGTH = 100

_T = TypeVar("_T")


# ── Structured data ──────────────────────────────────────────────


def _decode_json_ld(raw: str) -> object:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise StructuredDataError(str(exc)) from exc


def _schema_types(data: object) -> list[str]:
    """Declared @type values of every object in a decoded JSON-LD block.

    Top-level arrays and ``@graph`` members are expanded; an object
    without ``@type`` is reported as ``Unknown`` unless it is a bare
    ``@graph`` container.
    """
    items = list(data) if isinstance(data, list) else [data]
    types: list[str] = []

    for item in items:
        if not isinstance(item, dict):
            continue

        if "@graph" in item:
            graph = item["@graph"]
            items.extend(graph if isinstance(graph, list) else [graph])
            if "@type" not in item:
                continue

        type_name = item.get("@type")
        if isinstance(type_name, list):
            types.extend(str(t) for t in type_name if t)
            if not type_name:
                types.append("Unknown")
        elif type_name:
            types.append(str(type_name))
        else:
            types.append("Unknown")

    return types


def extract_structured_data(doc: ParsedDocument) -> StructuredDataInfo:
    """Find JSON-LD scripts and collect their declared schema types."""
    scripts = doc.select('script[type="application/ld+json"]')
    info = StructuredDataInfo(script_count=len(scripts))

    for script in scripts:
        try:
            data = _decode_json_ld(doc.html(script))
        except StructuredDataError as exc:
            logger.debug("Skipping malformed JSON-LD on %s: %s", doc.url, exc)
            continue
        info.schemas.extend(_schema_types(data))

    return info


# ── Language signals ─────────────────────────────────────────────


def _guarded(capability: str, url: str, func: Callable[[], _T], default: _T) -> _T:
    try:
        return func()
    except Exception as exc:
        logger.warning("NLP capability %s failed for %s: %s", capability, url, exc)
        return default


def extract_language_signals(text: str, analyzer: TextAnalyzer, url: str = "") -> LanguageSignals:
    try:
        readability = analyzer.readability(text)
    except ReadabilityError as exc:
        logger.info("Readability not computable for %s: %s", url, exc)
        readability = None

    return LanguageSignals(
        readability=readability,
        entities=_guarded("entities", url, lambda: analyzer.entities(text), EntityCounts()),
        question_count=_guarded("questions", url, lambda: analyzer.count_questions(text), 0),
        terms=_guarded("terms", url, lambda: analyzer.terms(text), []),
    )


# ── Orchestration ────────────────────────────────────────────────


def extract_geo_signals(doc: ParsedDocument, analyzer: TextAnalyzer) -> GeoSignals:
    body_text = doc.body_text()

    paragraphs = [text for text in (doc.text(p) for p in doc.select("p")) if text]

    signals = GeoSignals(
        body_text=body_text,
        html_length=len(doc.raw_html),
        h1_count=doc.count("h1"),
        h2_count=doc.count("h2"),
        paragraphs=paragraphs,
        list_count=doc.count("ul") + doc.count("ol"),
        table_count=doc.count("table"),
        structured_data=extract_structured_data(doc),
        definition_count=len(DEFINITION_PATTERN.findall(body_text)),
        example_count=len(EXAMPLE_PATTERN.findall(body_text)),
    )

    if signals.body_length > MIN_LANGUAGE_BODY_LENGTH:
        signals.language = extract_language_signals(body_text, analyzer, doc.url)

    return signals
