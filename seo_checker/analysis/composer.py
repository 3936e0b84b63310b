"""Response Composer: merges the SEO and GEO reports into one flat result.

The reports are only read: every value is copied into a fresh
``AnalysisResult`` model.
"""

from __future__ import annotations

from seo_checker.analysis.types import GeoReport, SeoReport
from seo_checker.schemas.analysis import AnalysisResult


def compose_result(seo: SeoReport, geo: GeoReport) -> AnalysisResult:
    signals = seo.signals
    return AnalysisResult.model_validate(
        {
            "score": seo.score,
            "title": signals.title,
            "title_length": seo.title_length,
            "description": signals.description,
            "description_length": seo.description_length,
            "og_title": signals.og_title,
            "og_description": signals.og_description,
            "h1_count": signals.h1_count,
            "h2_count": signals.h2_count,
            "images_without_alt": signals.images_without_alt,
            "total_images": signals.total_images,
            "issues": [issue.to_dict() for issue in seo.issues],
            "recommendations": list(seo.recommendations),
            "geo_score": geo.score,
            "geo_issues": [issue.to_dict() for issue in geo.issues],
            "geo_recommendations": list(geo.recommendations),
            "geo_metrics": geo.metrics.to_dict(),
        }
    )
