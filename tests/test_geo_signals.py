"""Tests for the GEO Extractor."""

import json

from conftest import FakeTextAnalyzer

from seo_checker.analysis.document import ParsedDocument
from seo_checker.analysis.geo_signals import (
    extract_geo_signals,
    extract_language_signals,
    extract_structured_data,
)
from seo_checker.analysis.patterns import DEFINITION_PATTERN, EXAMPLE_PATTERN
from seo_checker.analysis.types import EntityCounts


def _json_ld(data) -> str:
    return f'<script type="application/ld+json">{json.dumps(data)}</script>'


class TestStructuredData:
    def test_no_scripts(self):
        info = extract_structured_data(ParsedDocument("<html><body></body></html>"))
        assert info.script_count == 0
        assert not info.has_json_ld
        assert info.schemas == []

    def test_malformed_script_is_counted_but_not_typed(self):
        html = _json_ld({"@type": "Article"}) + '<script type="application/ld+json">{not json</script>'
        info = extract_structured_data(ParsedDocument(html))
        assert info.script_count == 2
        assert info.schemas == ["Article"]

    def test_missing_type_is_unknown(self):
        info = extract_structured_data(ParsedDocument(_json_ld({"@context": "https://schema.org", "name": "x"})))
        assert info.schemas == ["Unknown"]

    def test_top_level_array(self):
        info = extract_structured_data(ParsedDocument(_json_ld([{"@type": "HowTo"}, {"@type": "Organization"}])))
        assert info.schemas == ["HowTo", "Organization"]

    def test_graph_is_expanded(self):
        data = {"@context": "https://schema.org", "@graph": [{"@type": "WebSite"}, {"@type": "FAQPage"}]}
        info = extract_structured_data(ParsedDocument(_json_ld(data)))
        assert info.schemas == ["WebSite", "FAQPage"]

    def test_typed_graph_owner_keeps_members(self):
        data = {"@type": "WebPage", "@graph": [{"@type": "Article"}, {"@type": "BreadcrumbList"}]}
        info = extract_structured_data(ParsedDocument(_json_ld(data)))
        assert info.schemas == ["WebPage", "Article", "BreadcrumbList"]

    def test_multiple_types_on_one_object(self):
        info = extract_structured_data(ParsedDocument(_json_ld({"@type": ["Article", "NewsArticle"]})))
        assert info.schemas == ["Article", "NewsArticle"]

    def test_other_scripts_ignored(self):
        html = '<script type="text/javascript">var a = {"@type": "Article"};</script>'
        assert extract_structured_data(ParsedDocument(html)).script_count == 0


class TestPatterns:
    def test_definitions(self):
        text = "SEO is a practice. Schema means the vocabulary. It refers to the data. This is fine."
        assert len(DEFINITION_PATTERN.findall(text)) == 3

    def test_definition_needs_article(self):
        assert DEFINITION_PATTERN.findall("It is fast and it is good.") == []

    def test_examples(self):
        text = "For example, lists. Tools such as Ahrefs. I like it. See e.g. this. It is likely fine."
        assert len(EXAMPLE_PATTERN.findall(text)) == 4


class TestExtraction:
    def test_structure_counts(self):
        html = (
            "<html><body><h1>Title</h1><h2>A</h2><p>First paragraph.</p><p>   </p><p>Second one.</p>"
            "<ul><li>a</li></ul><ol><li>b</li></ol><table><tr><td>c</td></tr></table></body></html>"
        )
        signals = extract_geo_signals(ParsedDocument(html), FakeTextAnalyzer())
        assert signals.h1_count == 1
        assert signals.h2_count == 1
        assert signals.paragraphs == ["First paragraph.", "Second one."]
        assert signals.list_count == 2
        assert signals.table_count == 1
        assert signals.html_length == len(html)

    def test_short_body_skips_nlp(self):
        analyzer = FakeTextAnalyzer()
        signals = extract_geo_signals(ParsedDocument("<body><p>Tiny page.</p></body>"), analyzer)
        assert signals.language is None
        assert analyzer.calls == 0

    def test_long_body_runs_nlp(self):
        analyzer = FakeTextAnalyzer()
        text = "Search engine optimization is a discipline. " * 5
        signals = extract_geo_signals(ParsedDocument(f"<body><p>{text}</p></body>"), analyzer)
        assert signals.language is not None
        assert signals.language.entities.total == 4
        assert signals.definition_count == 5
        assert analyzer.calls == 4


class _BrokenEntities(FakeTextAnalyzer):
    def entities(self, text):
        raise LookupError("maxent_ne_chunker_tab not found")


class TestLanguageSignals:
    def test_readability_error_becomes_none(self):
        language = extract_language_signals("text", FakeTextAnalyzer(readability=None))
        assert language.readability is None

    def test_entity_failure_degrades_to_zero(self):
        language = extract_language_signals("some text here", _BrokenEntities())
        assert language.entities == EntityCounts()
        assert language.question_count == 1
