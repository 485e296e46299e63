"""
Plan generation pipeline: validate profile, build prompt, call the model,
validate the response and fall back to the bundled plan when needed.
"""
import json
from typing import Any, Mapping

from pydantic import ValidationError

from fitplan.core.errors import FitPlanError, MalformedResponseError
from fitplan.core.logger import logger, log_error
from fitplan.models.plan import MEAL_SLOTS, FitnessPlan, PlanOrigin, PlanOutcome
from fitplan.models.profile import UserProfile, validate_profile
from fitplan.services.cache_service import PlanCache
from fitplan.services.fallback_plan import fallback_plan
from fitplan.services.openai_service import PlanRequestExecutor
from fitplan.services.prompt_service import build_plan_request


REQUIRED_KEYS = ("workout_plan", "diet_plan", "summary")
WORKOUT_DAYS = 7


def parse_plan(raw: str | None) -> FitnessPlan:
    """
    Strictly parse a model response into a generated FitnessPlan.

    Checks shape only: required keys, list/object types, seven days and
    the four meal slots. Content is accepted as-is.

    Raises:
        MalformedResponseError: If the body does not describe a plan
    """
    if raw is None or not raw.strip():
        raise MalformedResponseError("AI returned an empty response")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"AI did not return valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponseError(f"Expected a JSON object, got {type(data).__name__}")

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise MalformedResponseError(f"Missing keys: {', '.join(missing)}")

    for key in ("workout_plan", "diet_plan"):
        if not isinstance(data[key], list):
            raise MalformedResponseError(f"'{key}' must be a list")
    if not isinstance(data["summary"], dict):
        raise MalformedResponseError("'summary' must be an object")

    if len(data["workout_plan"]) != WORKOUT_DAYS:
        raise MalformedResponseError(
            f"Expected {WORKOUT_DAYS} workout days, got {len(data['workout_plan'])}"
        )

    meals = {
        str(entry.get("meal", "")).strip().casefold()
        for entry in data["diet_plan"]
        if isinstance(entry, dict)
    }
    absent = [slot for slot in MEAL_SLOTS if slot.casefold() not in meals]
    if absent:
        raise MalformedResponseError(f"diet_plan is missing meals: {', '.join(absent)}")

    # The model's own origin key, if any, never overrides provenance
    data["origin"] = PlanOrigin.GENERATED
    try:
        return FitnessPlan.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Plan entries do not match schema ({e.error_count()} errors)") from e


def resolve_outcome(raw_or_error: str | None | Exception) -> PlanOutcome:
    """
    Turn an executor result into a usable plan. Never raises.

    Args:
        raw_or_error: Response content, or the exception the executor raised

    Returns:
        Generated outcome, or fallback outcome with the reason
    """
    if isinstance(raw_or_error, Exception):
        log_error("Plan generation upstream", raw_or_error)
        logger.warning("Serving fallback plan due to upstream failure")
        return PlanOutcome(plan=fallback_plan(), reason=f"upstream: {raw_or_error}")

    try:
        plan = parse_plan(raw_or_error)
    except MalformedResponseError as e:
        log_error("Plan response validation", e)
        logger.warning("Serving fallback plan due to malformed response")
        return PlanOutcome(plan=fallback_plan(), reason=f"malformed response: {e}")

    logger.info(f"Generated plan accepted: {len(plan.workout_plan)} days, {len(plan.diet_plan)} meals")
    return PlanOutcome(plan=plan)


def validate_or_fallback(raw_or_error: str | None | Exception) -> FitnessPlan:
    """Validated generated plan, or the bundled fallback plan."""
    return resolve_outcome(raw_or_error).plan


class PlanGenerator:
    """
    Runs the whole pipeline for one profile.

    Always resolves to a plan; a ProfileValidationError for raw input is the
    only exception that escapes, and it is raised before any upstream call.
    """

    def __init__(self, executor: PlanRequestExecutor, model: str = None):
        self.executor = executor
        self.model = model

    async def generate(
        self,
        profile: UserProfile | Mapping[str, Any],
        cache: PlanCache = None,
    ) -> PlanOutcome:
        profile = validate_profile(profile)

        logger.debug("Building plan request")
        payload = build_plan_request(profile, model=self.model)

        logger.info(f"Requesting plan for goal={profile.goal.value} level={profile.fitnessLevel.value}")
        try:
            raw = await self.executor.execute(payload)
        except FitPlanError as e:
            raw = e

        outcome = resolve_outcome(raw)
        if cache is not None:
            self._store(cache, outcome.plan, profile)
        return outcome

    async def cached_or_generate(
        self,
        profile: UserProfile | Mapping[str, Any],
        cache: PlanCache,
        refresh: bool = False,
    ) -> PlanOutcome:
        """
        Serve the session's cached plan when it was made for this same profile.

        A changed profile, or refresh=True, runs the pipeline and supersedes
        the cached plan.
        """
        profile = validate_profile(profile)
        if not refresh:
            cached = cache.get(profile)
            if cached is not None:
                logger.info("Serving cached plan")
                reason = "cached fallback" if cached.is_fallback else None
                return PlanOutcome(plan=cached, reason=reason)
        return await self.generate(profile, cache=cache)

    @staticmethod
    def _store(cache: PlanCache, plan: FitnessPlan, profile: UserProfile) -> None:
        try:
            cache.put(plan, profile)
        except OSError as e:
            log_error("Plan cache write", e)
