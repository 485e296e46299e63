"""
Pytest fixtures for the FitPlan Microservice tests.
"""
import copy
import os
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest
from fastapi.testclient import TestClient

# Mock environment variables before importing app
os.environ.setdefault("OPENROUTER_API_KEY", "test-api-key")

from fitplan.core.dependencies import get_executor, get_store
from fitplan.main import app
from fitplan.services.cache_service import MemoryStore
from fitplan.services.openai_service import PlanRequestExecutor, RetryPolicy


UPSTREAM_URL = "https://openrouter.ai/api/v1/chat/completions"


def make_completion(content):
    """Chat-completion response whose first choice carries content."""
    return MagicMock(choices=[MagicMock(message=MagicMock(content=content))])


def make_status_error(status_code: int) -> openai.APIStatusError:
    request = httpx.Request("POST", UPSTREAM_URL)
    response = httpx.Response(status_code, request=request)
    return openai.APIStatusError(f"HTTP {status_code}", response=response, body=None)


def make_timeout_error() -> openai.APITimeoutError:
    return openai.APITimeoutError(request=httpx.Request("POST", UPSTREAM_URL))


@pytest.fixture
def completion():
    return make_completion


@pytest.fixture
def status_error():
    return make_status_error


@pytest.fixture
def timeout_error():
    return make_timeout_error


@pytest.fixture
def mock_client():
    """Injected OpenAI client with an async chat.completions.create."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def sleeps():
    """Records backoff waits (seconds) instead of sleeping."""
    return []


@pytest.fixture
def fake_sleep(sleeps):
    async def _sleep(seconds):
        sleeps.append(seconds)
    return _sleep


@pytest.fixture
def executor(mock_client, fake_sleep):
    return PlanRequestExecutor(mock_client, RetryPolicy(), sleep=fake_sleep)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(executor, store):
    """Test client with the upstream and plan store replaced."""
    app.dependency_overrides[get_executor] = lambda: executor
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_profile():
    """Profile as the form submits it."""
    return {
        "name": "Ana",
        "age": 30,
        "gender": "Female",
        "heightCm": 165,
        "weightKg": 60,
        "goal": "WeightLoss",
        "fitnessLevel": "Beginner",
        "location": "Home",
        "dietPreference": "Vegetarian",
        "sleepHours": 7,
        "waterIntakeL": 2,
        "stressLevel": "Low"
    }


_GENERATED_PLAN = {
    "workout_plan": [
        {
            "day": day,
            "focus": focus,
            "exercises": [
                {"name": name, "sets": "3", "reps": "12", "tips": "Move slowly"}
            ]
        }
        for day, focus, name in [
            ("Monday", "Lower Body", "Bodyweight Squats"),
            ("Tuesday", "Cardio", "Brisk Walk"),
            ("Wednesday", "Upper Body", "Incline Push Ups"),
            ("Thursday", "Mobility", "Cat Cow"),
            ("Friday", "Core", "Dead Bug"),
            ("Saturday", "Cardio", "Step Ups"),
            ("Sunday", "Rest", "Gentle Yoga"),
        ]
    ],
    "diet_plan": [
        {"meal": "Breakfast", "food": "Overnight oats with chia", "calories": 380, "protein": "18g", "carbs": "55g", "fats": "10g"},
        {"meal": "Lunch", "food": "Chickpea and spinach curry", "calories": 520, "protein": "22g", "carbs": "70g", "fats": "14g"},
        {"meal": "Snack", "food": "Apple with peanut butter", "calories": 200, "protein": "5g", "carbs": "25g", "fats": "9g"},
        {"meal": "Dinner", "food": "Paneer stir fry with brown rice", "calories": 500, "protein": "28g", "carbs": "50g", "fats": "18g"}
    ],
    "summary": {
        "daily_calories": 1600,
        "macros": {"protein": "73g", "carbs": "200g", "fats": "51g"}
    }
}


@pytest.fixture
def sample_plan_data():
    """Valid 7-day, 4-meal plan as the model would return it."""
    return copy.deepcopy(_GENERATED_PLAN)
