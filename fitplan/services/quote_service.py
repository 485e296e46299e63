"""
Daily motivation quote, with a local fallback when the model is unavailable.
"""
from fitplan.core.errors import FitPlanError, TerminalUpstreamError
from fitplan.core.logger import logger, log_error
from fitplan.models.profile import UserProfile
from fitplan.services.openai_service import PlanRequestExecutor
from fitplan.services.prompt_service import build_quote_request


FALLBACK_QUOTE = "Consistency is the key to progress. Keep showing up!"


async def generate_motivation_quote(
    executor: PlanRequestExecutor,
    profile: UserProfile,
    model: str = None,
) -> str:
    """
    Generate a one-sentence quote for the user's goal and level.

    Returns:
        Quote text, or FALLBACK_QUOTE on any upstream failure
    """
    logger.info(f"Generating motivation quote for goal={profile.goal.value}")
    try:
        content = await executor.execute(build_quote_request(profile, model=model))
    except FitPlanError as e:
        log_error("Motivation quote", e)
        if isinstance(e, TerminalUpstreamError) and e.status_code == 402:
            logger.warning("Upstream balance exhausted. Using local fallback quote.")
        return FALLBACK_QUOTE

    quote = (content or "").strip().strip('"“”').strip()
    if not quote:
        logger.warning("Empty quote from AI. Using local fallback quote.")
        return FALLBACK_QUOTE
    return quote
