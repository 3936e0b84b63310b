"""SEO / GEO page checker."""

__version__ = "1.0.0"
