"""Pydantic models for the issue priority matrix."""

from typing import Literal

from pydantic import Field

from seo_checker.schemas.analysis import CamelModel, IssueOut


class PriorityIssue(IssueOut):
    source: Literal["seo", "geo"]


class PriorityRequest(CamelModel):
    issues: list[PriorityIssue] = Field(default_factory=list)


class QuadrantGroup(CamelModel):
    quadrant: Literal["quick-win", "strategic", "nice-to-have", "avoid"]
    label: str
    subtitle: str
    issues: list[PriorityIssue] = Field(default_factory=list)


class PriorityMatrix(CamelModel):
    total: int = Field(ge=0)
    quadrants: list[QuadrantGroup] = Field(default_factory=list)
