"""Page analysis endpoint: SEO + GEO report for one URL."""

import logging

import httpx
from fastapi import APIRouter, Depends

from seo_checker.analysis.nlp import TextAnalyzer
from seo_checker.analysis.pipeline import analyze_url
from seo_checker.core.dependencies import get_http_client, get_text_analyzer
from seo_checker.core.exceptions import URL_REQUIRED, AnalysisFailedError, FetchError, InputError
from seo_checker.core.metrics import ANALYSIS_RUNS
from seo_checker.schemas.analysis import AnalysisResult, AnalyzeRequest, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    payload: AnalyzeRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
    text_analyzer: TextAnalyzer = Depends(get_text_analyzer),
) -> AnalysisResult:
    """Fetch a page and return its SEO and GEO scores with issues and recommendations."""
    url = (payload.url or "").strip()
    if not url:
        ANALYSIS_RUNS.labels(outcome="input_error").inc()
        raise InputError(URL_REQUIRED)

    log_extra = {"target_url": url}
    logger.info("[api.analyze] start url=%s", url, extra=log_extra)

    try:
        result = await analyze_url(url, client, text_analyzer)
    except FetchError as exc:
        ANALYSIS_RUNS.labels(outcome="fetch_error").inc()
        logger.warning(
            "[api.analyze] fetch failed url=%s kind=%s: %s", url, exc.kind, exc.detail, extra=log_extra
        )
        raise AnalysisFailedError() from exc
    except Exception as exc:
        ANALYSIS_RUNS.labels(outcome="error").inc()
        logger.exception("[api.analyze] analysis crashed url=%s", url, extra=log_extra)
        raise AnalysisFailedError() from exc

    ANALYSIS_RUNS.labels(outcome="success").inc()
    logger.info(
        "[api.analyze] done url=%s score=%d geo_score=%d", url, result.score, result.geo_score, extra=log_extra
    )
    return result
