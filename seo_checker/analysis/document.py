"""Document Parser: queryable, read-only view over a page's HTML.

Thin wrapper around BeautifulSoup (lxml tree builder) so the extractors
only depend on a handful of operations: CSS selection, normalized text,
attribute and inner-HTML reads, element counts.
lxml recovers from unclosed tags and a missing DOCTYPE without raising.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


class ParsedDocument:
    def __init__(self, html: str, url: str = "") -> None:
        self.url = url
        self.raw_html = html
        self._soup = BeautifulSoup(html, "lxml")

    # ── Queries ────────────────────────────────────────────────────

    def select(self, selector: str) -> list[Tag]:
        """All elements matching a CSS selector, in document order."""
        return self._soup.select(selector)

    def select_one(self, selector: str) -> Tag | None:
        return self._soup.select_one(selector)

    def count(self, selector: str) -> int:
        return len(self._soup.select(selector))

    # ── Node accessors ─────────────────────────────────────────────

    @staticmethod
    def text(node: Tag) -> str:
        return normalize_whitespace(node.get_text(" "))

    @staticmethod
    def attr(node: Tag, name: str) -> str:
        value = node.get(name)
        if isinstance(value, list):  # multi-valued attributes such as class
            return " ".join(value)
        return value or ""

    @staticmethod
    def html(node: Tag) -> str:
        """Inner HTML; for <script> this is the raw, unescaped source."""
        return node.decode_contents()

    # ── Shortcuts used by the extractors ───────────────────────────

    def title_text(self) -> str:
        return normalize_whitespace(" ".join(self.text(t) for t in self.select("title")))

    def meta_content(self, attr: str, value: str) -> str:
        """``content`` of the first ``<meta {attr}="{value}">``, or empty string."""
        node = self._soup.find("meta", attrs={attr: value})
        return self.attr(node, "content").strip() if node else ""

    def body_text(self) -> str:
        """Visible text of the body (whole document when there is no <body>)."""
        root = self._soup.body or self._soup
        return self.text(root)
