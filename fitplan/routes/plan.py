"""
Plan generation, retrieval and export routes.
"""
import time
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from fitplan.core.dependencies import get_plan_cache, get_plan_generator
from fitplan.core.logger import log_request, log_response
from fitplan.models.plan import PlanOutcome
from fitplan.models.profile import UserProfile
from fitplan.models.schemas import PlanAPIResponse
from fitplan.services import pdf_service
from fitplan.services.cache_service import PlanCache
from fitplan.services.plan_service import PlanGenerator

router = APIRouter()


def to_api_response(outcome: PlanOutcome) -> PlanAPIResponse:
    return PlanAPIResponse(
        status="degraded" if outcome.degraded else "success",
        origin=outcome.plan.origin,
        reason=outcome.reason,
        plan=outcome.plan.to_response(),
    )


@router.post("/generate-plan", response_model=PlanAPIResponse)
async def generate_plan(
    req: UserProfile,
    generator: Annotated[PlanGenerator, Depends(get_plan_generator)],
    cache: Annotated[PlanCache, Depends(get_plan_cache)],
    refresh: bool = False,
):
    """
    Generate a personalized 7-day workout and diet plan.

    Always returns a complete plan. When the AI call fails or returns
    malformed data the bundled plan is served with status "degraded".
    Resubmitting the same profile returns the session's cached plan
    unless refresh=true.
    """
    log_request("/generate-plan")
    started = time.perf_counter()

    outcome = await generator.cached_or_generate(req, cache, refresh=refresh)
    response = to_api_response(outcome)

    log_response("/generate-plan", response.status, (time.perf_counter() - started) * 1000)
    return response


@router.get("/plan", response_model=PlanAPIResponse)
def get_plan(cache: Annotated[PlanCache, Depends(get_plan_cache)]):
    """Latest plan produced for this session."""
    log_request("/plan", method="GET")

    plan = cache.get()
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan generated for this session yet")

    reason = "cached fallback" if plan.is_fallback else None
    return to_api_response(PlanOutcome(plan=plan, reason=reason))


@router.get("/plan/pdf")
def export_plan_pdf(cache: Annotated[PlanCache, Depends(get_plan_cache)]):
    """Download the session's latest plan as a PDF."""
    log_request("/plan/pdf", method="GET")

    plan = cache.get()
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan generated for this session yet")

    content = pdf_service.plan_to_pdf(plan)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="fitness-plan.pdf"'},
    )
