from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from seo_checker.analysis.types import EntityCounts, Readability
from seo_checker.core.dependencies import get_http_client, get_text_analyzer
from seo_checker.core.exceptions import ReadabilityError
from seo_checker.main import app


class FakeTextAnalyzer:
    """Deterministic stand-in for the nltk/textstat analyzer."""

    def __init__(
        self,
        readability: Readability | None = Readability(score=70.0, grade=8.0),
        entities: EntityCounts = EntityCounts(people=2, places=1, organizations=1),
        questions: int = 1,
        terms: list[str] | None = None,
    ) -> None:
        self._readability = readability
        self._entities = entities
        self._questions = questions
        self._terms = terms
        self.calls = 0

    def readability(self, text: str) -> Readability:
        self.calls += 1
        if self._readability is None:
            raise ReadabilityError("no sentences")
        return self._readability

    def entities(self, text: str) -> EntityCounts:
        self.calls += 1
        return self._entities

    def count_questions(self, text: str) -> int:
        self.calls += 1
        return self._questions

    def terms(self, text: str) -> list[str]:
        self.calls += 1
        if self._terms is not None:
            return list(self._terms)
        return text.lower().split()


class Upstream:
    """The page served to the analyze endpoint's outbound fetch."""

    def __init__(self) -> None:
        self.html = "<html><head><title>Test</title></head><body></body></html>"
        self.status_code = 200
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.html, headers={"content-type": "text/html"})


@pytest.fixture
def fake_analyzer() -> FakeTextAnalyzer:
    return FakeTextAnalyzer()


@pytest.fixture
def upstream(fake_analyzer: FakeTextAnalyzer):
    """Route outbound fetches to an in-memory page and use the fake analyzer."""
    page = Upstream()

    async def _client() -> AsyncGenerator[httpx.AsyncClient, None]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(page.handler), follow_redirects=True) as c:
            yield c

    app.dependency_overrides[get_http_client] = _client
    app.dependency_overrides[get_text_analyzer] = lambda: fake_analyzer
    yield page
    app.dependency_overrides.clear()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
