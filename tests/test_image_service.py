"""
Tests for illustration URL construction.
"""
from urllib.parse import unquote, urlparse, parse_qs

import pytest

from fitplan.services.fallback_plan import fallback_plan
from fitplan.services.image_service import generate_image_url, plan_image_urls


def test_exercise_url_embeds_encoded_prompt():
    url = generate_image_url("Barbell Squats", "exercise", "Female")
    parsed = urlparse(url)

    assert parsed.netloc == "image.pollinations.ai"
    assert " " not in url
    assert "Female athlete actively performing the Barbell Squats exercise" in unquote(parsed.path)
    assert parse_qs(parsed.query) == {"width": ["512"], "height": ["512"], "nologo": ["true"]}


def test_meal_url_uses_culinary_prompt():
    url = generate_image_url("Greek Yogurt & Almonds", "meal")

    assert "%26" in url
    assert "professional culinary photography of Greek Yogurt & Almonds" in unquote(url)


def test_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown image kind"):
        generate_image_url("Plank", "landscape")


def test_plan_image_urls_cover_every_item():
    plan = fallback_plan()

    urls = plan_image_urls(plan, gender="Male")

    exercise_names = {ex.name for day in plan.workout_plan for ex in day.exercises}
    assert set(urls["exercises"]) == exercise_names
    assert set(urls["meals"]) == {m.food for m in plan.diet_plan}
    assert "Male%20athlete" in urls["exercises"]["Plank"]
