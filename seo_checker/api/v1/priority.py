"""Priority matrix endpoint: groups SEO/GEO issues by impact and effort."""

from fastapi import APIRouter

from seo_checker.analysis.priority import build_priority_matrix
from seo_checker.schemas.priority import PriorityMatrix, PriorityRequest

router = APIRouter(tags=["analysis"])


@router.post("/priority-matrix", response_model=PriorityMatrix)
async def priority_matrix(payload: PriorityRequest) -> PriorityMatrix:
    return build_priority_matrix(payload.issues)
