from collections.abc import AsyncGenerator

import httpx

from seo_checker.analysis.nlp import NltkTextAnalyzer, TextAnalyzer
from seo_checker.services.fetcher import build_client


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    async with build_client() as client:
        yield client


def get_text_analyzer() -> TextAnalyzer:
    return NltkTextAnalyzer()
