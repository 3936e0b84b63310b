"""Page Analysis Engine.

Single-page pipeline producing two heuristic scores:
  1. Document Parser (BeautifulSoup wrapper)
  2. SEO Extractor & Scorer
  3. GEO Extractor (structure, JSON-LD, NLP signals)
  4. GEO Scorer (four weighted sections)
  5. Response Composer

Input:  FetchedDocument (raw HTML + URL)
Output: AnalysisResult (flat report consumed by the UI)
"""
