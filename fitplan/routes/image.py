"""
Illustration URL routes for exercises and meals.
"""
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException

from fitplan.core.dependencies import get_plan_cache
from fitplan.core.logger import log_request
from fitplan.models.schemas import ImageUrlResponse, ImageUrlsRequest, ImageUrlsResponse
from fitplan.services import image_service
from fitplan.services.cache_service import PlanCache

router = APIRouter()


@router.get("/image-url", response_model=ImageUrlResponse)
def image_url(prompt: str, kind: Literal["exercise", "meal"] = "exercise", gender: str = ""):
    """Illustration URL for a single exercise or meal."""
    log_request("/image-url", method="GET")
    return {
        "prompt": prompt,
        "kind": kind,
        "url": image_service.generate_image_url(prompt, kind, gender),
    }


@router.post("/image-urls", response_model=ImageUrlsResponse)
def image_urls(req: ImageUrlsRequest, cache: Annotated[PlanCache, Depends(get_plan_cache)]):
    """
    Illustration URLs for every exercise and meal in a plan.
    Uses the plan in the body, or the session's cached plan.
    """
    log_request("/image-urls")

    plan = req.plan or cache.get()
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan given and none cached for this session")
    return image_service.plan_image_urls(plan, req.gender)
