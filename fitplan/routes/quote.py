"""
Motivation quote routes.
"""
from typing import Annotated

from fastapi import APIRouter, Depends

from fitplan.core.dependencies import get_executor
from fitplan.core.config import settings
from fitplan.core.logger import log_request
from fitplan.models.profile import UserProfile
from fitplan.models.schemas import QuoteResponse
from fitplan.services import quote_service
from fitplan.services.openai_service import PlanRequestExecutor, retry_policy_from_settings

router = APIRouter()


@router.post("/motivation-quote", response_model=QuoteResponse)
async def motivation_quote(
    req: UserProfile,
    executor: Annotated[PlanRequestExecutor, Depends(get_executor)],
):
    """
    Short daily quote tailored to the user's goal and fitness level.
    Falls back to a fixed quote if the AI is unavailable.
    """
    log_request("/motivation-quote")

    policy = retry_policy_from_settings(settings, max_retries=settings.QUOTE_MAX_RETRIES)
    quote = await quote_service.generate_motivation_quote(executor.with_policy(policy), req)
    return {"status": "success", "quote": quote}
