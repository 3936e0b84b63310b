"""Analysis Pipeline: orchestrator for the single-page analysis.

Chains the steps in order:
  1. Fetcher (async, the only suspension point)
  2. Document Parser
  3. SEO Extractor & Scorer
  4. GEO Extractor (structure, JSON-LD, NLP)
  5. GEO Scorer
  6. Response Composer

Input:  URL (or an already fetched document)
Output: AnalysisResult
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from seo_checker.analysis.composer import compose_result
from seo_checker.analysis.document import ParsedDocument
from seo_checker.analysis.geo_scoring import score_geo
from seo_checker.analysis.geo_signals import extract_geo_signals
from seo_checker.analysis.nlp import TextAnalyzer
from seo_checker.analysis.seo import analyze_seo
from seo_checker.analysis.types import FetchedDocument
from seo_checker.schemas.analysis import AnalysisResult
from seo_checker.services.fetcher import fetch_document

logger = logging.getLogger(__name__)


def analyze_document(document: FetchedDocument, text_analyzer: TextAnalyzer) -> AnalysisResult:
    """Run parse → extract → score → compose over already fetched HTML.

    Deterministic for a given document and analyzer; no I/O.
    """
    doc = ParsedDocument(document.html, url=document.url)

    seo = analyze_seo(doc)
    geo = score_geo(extract_geo_signals(doc, text_analyzer))

    logger.info(
        "Analysis complete: url=%s, status=%d, seo=%d (%d issues), geo=%d (%d issues)",
        document.url,
        document.status_code,
        seo.score,
        len(seo.issues),
        geo.score,
        len(geo.issues),
    )

    return compose_result(seo, geo)


async def analyze_url(
    url: str,
    client: httpx.AsyncClient,
    text_analyzer: TextAnalyzer,
) -> AnalysisResult:
    """Fetch ``url`` and analyze it. CPU-bound work runs in a worker thread."""
    document = await fetch_document(client, url)
    return await asyncio.to_thread(analyze_document, document, text_analyzer)
