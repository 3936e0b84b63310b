"""Tests for the SEO Extractor & Scorer."""

import pytest

from seo_checker.analysis.document import ParsedDocument
from seo_checker.analysis.seo import analyze_seo, extract_seo_signals, score_seo
from seo_checker.analysis.types import Level, SeoSignals


def _signals(**overrides) -> SeoSignals:
    """Signals that violate no rule."""
    base = dict(
        title="T" * 55,
        description="D" * 155,
        og_title="OG title",
        og_description="OG description",
        h1_count=1,
        h2_count=2,
        total_images=2,
        images_without_alt=0,
    )
    base.update(overrides)
    return SeoSignals(**base)


class TestExtraction:
    def test_extracts_all_fields(self):
        doc = ParsedDocument(
            "<html><head><title>Page title</title>"
            '<meta name="description" content="A description">'
            '<meta property="og:title" content="OG T">'
            '<meta property="og:description" content="OG D"></head>'
            '<body><h1>One</h1><h2>a</h2><h2>b</h2><img src="x"><img src="y" alt="y"></body></html>'
        )
        signals = extract_seo_signals(doc)
        assert signals.title == "Page title"
        assert signals.description == "A description"
        assert signals.og_title == "OG T"
        assert signals.og_description == "OG D"
        assert signals.h1_count == 1
        assert signals.h2_count == 2
        assert signals.total_images == 2
        assert signals.images_without_alt == 1


class TestScoring:
    def test_perfect_page(self):
        title = "A" * 55
        description = "B" * 155
        doc = ParsedDocument(
            f"<html><head><title>{title}</title>"
            f'<meta name="description" content="{description}">'
            '<meta property="og:title" content="OG">'
            '<meta property="og:description" content="OG desc"></head>'
            '<body><h1>Main</h1><img src="a.png" alt="A"></body></html>'
        )
        report = analyze_seo(doc)
        assert report.score == 100
        assert report.issues == []
        assert report.recommendations == []
        assert report.title_length == 55
        assert report.description_length == 155

    def test_worst_page(self):
        doc = ParsedDocument('<html><body><img src="1"><img src="2"><img src="3"></body></html>')
        report = analyze_seo(doc)
        assert report.score == 100 - 15 - 15 - 10 - 10 - 10
        assert len(report.issues) == 5
        assert len(report.recommendations) == 5
        assert report.issues[-1].title == "3 images missing alt text"

    @pytest.mark.parametrize(
        "length,expected",
        [(1, 90), (29, 90), (30, 100), (55, 100), (60, 100), (61, 95), (200, 95)],
    )
    def test_title_boundaries(self, length, expected):
        assert score_seo(_signals(title="x" * length)).score == expected

    def test_title_missing(self):
        report = score_seo(_signals(title=""))
        assert report.score == 85
        assert report.issues[0].title == "Missing title tag"
        assert report.issues[0].impact == Level.HIGH

    @pytest.mark.parametrize(
        "length,expected",
        [(0, 85), (119, 90), (120, 100), (160, 100), (161, 95)],
    )
    def test_description_boundaries(self, length, expected):
        assert score_seo(_signals(description="d" * length)).score == expected

    def test_title_tiers_are_exclusive(self):
        report = score_seo(_signals(title="short"))
        titles = [i.title for i in report.issues]
        assert titles == ["Title is too short"]

    def test_open_graph_partial(self):
        report = score_seo(_signals(og_description=""))
        assert report.score == 90
        assert report.issues[0].title == "Missing Open Graph tags"

    def test_multiple_h1_message_has_count(self):
        report = score_seo(_signals(h1_count=3))
        assert report.score == 95
        assert report.issues[0].title == "Multiple H1 headings found (3)"

    def test_no_h1(self):
        report = score_seo(_signals(h1_count=0))
        assert report.score == 90
        assert report.recommendations == ["Add exactly one H1 heading with your main keyword"]

    def test_order_follows_rule_evaluation(self):
        report = score_seo(_signals(title="", description="", og_title="", h1_count=0, images_without_alt=1))
        assert [i.title for i in report.issues] == [
            "Missing title tag",
            "Missing meta description",
            "Missing Open Graph tags",
            "No H1 heading found",
            "1 images missing alt text",
        ]
        assert report.score == 40

    def test_issues_are_structured(self):
        report = score_seo(_signals(images_without_alt=2))
        issue = report.issues[0].to_dict()
        assert set(issue) == {"title", "description", "impact", "effort"}
        assert issue["impact"] in ("high", "medium", "low")
        assert issue["effort"] in ("high", "medium", "low")

    def test_score_never_negative(self):
        report = score_seo(
            SeoSignals(title="", description="", h1_count=0, images_without_alt=10, total_images=10)
        )
        assert 0 <= report.score <= 100
