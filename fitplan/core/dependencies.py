"""
FastAPI dependencies for the shared upstream client and plan store.

The client, executor and store are built once in the app lifespan and kept
on app.state; tests replace them with app.dependency_overrides.
"""
from typing import Annotated

from fastapi import Depends, Header, Request

from fitplan.services.cache_service import PlanCache
from fitplan.services.openai_service import PlanRequestExecutor
from fitplan.services.plan_service import PlanGenerator


def get_executor(request: Request) -> PlanRequestExecutor:
    return request.app.state.executor


def get_store(request: Request):
    return request.app.state.plan_store


def get_plan_generator(executor: Annotated[PlanRequestExecutor, Depends(get_executor)]) -> PlanGenerator:
    return PlanGenerator(executor)


def get_plan_cache(
    store=Depends(get_store),
    x_session_id: Annotated[str, Header()] = "default",
) -> PlanCache:
    """Cache slot for the caller's session (X-Session-Id header)."""
    return PlanCache(store, session_id=x_session_id or "default")
