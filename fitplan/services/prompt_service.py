"""
Prompt construction for the upstream model. Pure functions, no I/O.
"""
import json

from fitplan.core.config import settings
from fitplan.models.plan import MEAL_SLOTS
from fitplan.models.profile import UserProfile


# Example document the model must mirror key-for-key
PLAN_RESPONSE_SCHEMA = {
    "workout_plan": [
        {
            "day": "Monday",
            "focus": "Muscle Group",
            "exercises": [
                {"name": "Exercise", "sets": "3", "reps": "12", "tips": "Tip"}
            ]
        }
    ],
    "diet_plan": [
        {
            "meal": "Breakfast",
            "food": "Description",
            "calories": 400,
            "protein": "30g",
            "carbs": "40g",
            "fats": "10g"
        }
    ],
    "summary": {
        "daily_calories": 2500,
        "macros": {"protein": "150g", "carbs": "300g", "fats": "70g"}
    }
}


def _number(value: float) -> str:
    return f"{value:g}"


def render_profile(profile: UserProfile) -> str:
    """One labelled line per profile field."""
    lines = [
        f"- Name: {profile.name}",
        f"- Age: {_number(profile.age)} years",
        f"- Gender: {profile.gender.label}",
        f"- Height: {_number(profile.heightCm)} cm",
        f"- Weight: {_number(profile.weightKg)} kg",
        f"- Goal: {profile.goal.label}",
        f"- Fitness Level: {profile.fitnessLevel.label}",
        f"- Workout Location: {profile.location.label}",
        f"- Dietary Preference: {profile.dietPreference.label}",
        f"- Sleep: {_number(profile.sleepHours)} hours per night",
        f"- Water Intake: {_number(profile.waterIntakeL)} litres per day",
        f"- Stress Level: {profile.stressLevel.label}",
    ]
    return "\n".join(lines)


def build_plan_prompt(profile: UserProfile) -> str:
    schema = json.dumps(PLAN_RESPONSE_SCHEMA, indent=2)
    return f"""
You are an expert fitness coach and nutritionist.
Generate a 7-day Workout and Diet plan for this user:

{render_profile(profile)}

RULES:
1. workout_plan must contain exactly 7 entries, Monday through Sunday, in order.
2. diet_plan must include these meals: {", ".join(MEAL_SLOTS)}.
3. Express protein, carbs and fats in grams with a "g" suffix.
4. Return ONLY valid JSON. Do not wrap it in markdown code fences and do not add any text outside the JSON object.

The response must follow this exact structure:
{schema}
"""


def build_plan_request(profile: UserProfile, model: str = None) -> dict:
    """
    Render a profile into a chat-completion request payload.

    Args:
        profile: Validated user profile
        model: Upstream model identifier (defaults to configured model)

    Returns:
        Keyword arguments for chat.completions.create
    """
    return {
        "model": model or settings.OPENROUTER_MODEL,
        "messages": [{"role": "user", "content": build_plan_prompt(profile)}],
        "response_format": {"type": "json_object"},
    }


# --- Motivation Quote ---

def build_quote_request(profile: UserProfile, model: str = None) -> dict:
    """Chat-completion payload for a one-sentence motivation quote."""
    prompt = f"""
You are an inspiring fitness coach. Generate a short, powerful, 1-sentence daily motivational quote for {profile.name}.
Context:
- Goal: {profile.goal.label}
- Level: {profile.fitnessLevel.label}

CRITICAL: Output ONLY the quote text. No quotation marks, no "Author:", no tags.
"""
    return {
        "model": model or settings.OPENROUTER_MODEL,
        "messages": [{"role": "user", "content": prompt}],
    }
