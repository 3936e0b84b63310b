"""
Command-line page check.

Usage:
    python -m seo_checker https://example.com/article --pretty
    python -m seo_checker https://example.com/article --priorities
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from seo_checker.analysis.nlp import NltkTextAnalyzer
from seo_checker.analysis.pipeline import analyze_url
from seo_checker.analysis.priority import prioritize_result, score_label
from seo_checker.core.exceptions import FetchError
from seo_checker.core.logging import setup_logging
from seo_checker.schemas.analysis import AnalysisResult
from seo_checker.services.fetcher import build_client

logger = logging.getLogger("seo_checker.cli")

EXIT_OK = 0
EXIT_ANALYSIS_FAILED = 1
EXIT_BAD_INPUT = 2


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="seo_checker", description="SEO and GEO score for a single page")
    parser.add_argument("url", help="absolute http(s) URL of the page")
    parser.add_argument("--pretty", action="store_true", help="indent the JSON output")
    parser.add_argument("--priorities", action="store_true", help="print the issue priority matrix instead")
    return parser.parse_args(argv)


async def _run(url: str) -> AnalysisResult:
    async with build_client() as client:
        return await analyze_url(url, client, NltkTextAnalyzer())


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(stream=sys.stderr)  # stdout carries the JSON report

    url = args.url.strip()
    if not url:
        logger.error("URL is required")
        return EXIT_BAD_INPUT

    try:
        result = asyncio.run(_run(url))
    except FetchError as exc:
        logger.error("Could not fetch %s (%s): %s", url, exc.kind, exc.detail)
        return EXIT_ANALYSIS_FAILED
    except Exception:
        logger.exception("Analysis failed for %s", url)
        return EXIT_ANALYSIS_FAILED

    logger.info(
        "SEO %d (%s), GEO %d (%s)",
        result.score,
        score_label(result.score),
        result.geo_score,
        score_label(result.geo_score),
    )

    payload = prioritize_result(result) if args.priorities else result
    print(json.dumps(payload.model_dump(by_alias=True), indent=2 if args.pretty else None, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
