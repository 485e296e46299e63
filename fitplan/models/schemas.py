"""
Pydantic models for request/response validation.
"""
from typing import Literal

from pydantic import BaseModel

from fitplan.models.plan import FitnessPlan, PlanOrigin


# --- Plan Models ---

class PlanAPIResponse(BaseModel):
    """API wrapper response for the plan endpoints."""
    status: Literal["success", "degraded"]
    origin: PlanOrigin
    reason: str | None = None
    plan: dict


# --- Quote Models ---

class QuoteResponse(BaseModel):
    """Motivation quote response."""
    status: str = "success"
    quote: str


# --- Image Models ---

class ImageUrlsRequest(BaseModel):
    """Request model for plan illustration URLs."""
    plan: FitnessPlan | None = None
    gender: str = ""


class ImageUrlResponse(BaseModel):
    """Single illustration URL."""
    prompt: str
    kind: str
    url: str


class ImageUrlsResponse(BaseModel):
    """Illustration URLs keyed by exercise and meal."""
    exercises: dict[str, str]
    meals: dict[str, str]


# --- Generic Response Models ---

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
