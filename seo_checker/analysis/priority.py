"""Priority matrix: groups issues by impact and effort.

  quick-win     impact high/medium, effort low/medium
  strategic     impact high/medium, effort high
  nice-to-have  impact low,         effort low/medium
  avoid         impact low,         effort high
"""

from __future__ import annotations

from seo_checker.analysis.types import IssueSource, Level, Quadrant
from seo_checker.schemas.analysis import AnalysisResult, IssueOut
from seo_checker.schemas.priority import PriorityIssue, PriorityMatrix, QuadrantGroup

QUADRANT_LABELS: dict[Quadrant, tuple[str, str]] = {
    Quadrant.QUICK_WIN: ("Quick Wins", "High Impact, Low Effort"),
    Quadrant.STRATEGIC: ("Strategic", "High Impact, High Effort"),
    Quadrant.NICE_TO_HAVE: ("Nice-to-Have", "Low Impact, Low Effort"),
    Quadrant.AVOID: ("Avoid for Now", "Low Impact, High Effort"),
}


def classify_quadrant(impact: str, effort: str) -> Quadrant:
    high_impact = impact in (Level.HIGH, Level.MEDIUM)
    low_effort = effort in (Level.LOW, Level.MEDIUM)

    if high_impact and low_effort:
        return Quadrant.QUICK_WIN
    if high_impact:
        return Quadrant.STRATEGIC
    if low_effort:
        return Quadrant.NICE_TO_HAVE
    return Quadrant.AVOID


def build_priority_matrix(issues: list[PriorityIssue]) -> PriorityMatrix:
    """Group issues into the four quadrants, keeping input order within each."""
    buckets: dict[Quadrant, list[PriorityIssue]] = {q: [] for q in QUADRANT_LABELS}
    for issue in issues:
        buckets[classify_quadrant(issue.impact, issue.effort)].append(issue)

    return PriorityMatrix(
        total=len(issues),
        quadrants=[
            QuadrantGroup(quadrant=q.value, label=label, subtitle=subtitle, issues=buckets[q])
            for q, (label, subtitle) in QUADRANT_LABELS.items()
        ],
    )


def _tag(issues: list[IssueOut], source: IssueSource) -> list[PriorityIssue]:
    return [PriorityIssue(**issue.model_dump(), source=source.value) for issue in issues]


def prioritize_result(result: AnalysisResult) -> PriorityMatrix:
    """Priority matrix over both SEO and GEO issues of an analysis."""
    return build_priority_matrix(_tag(result.issues, IssueSource.SEO) + _tag(result.geo_issues, IssueSource.GEO))


def score_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Needs Work"
    return "Poor"
